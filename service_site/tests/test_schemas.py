"""
Unit tests for the CMS schema definitions.
"""

import pytest

from service_site.app.schemas import (
    SCHEMA_TYPES,
    FieldType,
    SchemaField,
    SchemaType,
    get_schema_type,
    paths_for_document,
    tags_for_document_type,
    validate_schema_types,
)
from shared.errors import ValidationError


def test_registered_types_in_order():
    assert [schema_type.name for schema_type in SCHEMA_TYPES] == [
        "homepage", "event", "post", "author", "category", "product", "artist", "news",
    ]


def test_registered_types_are_valid():
    validate_schema_types(SCHEMA_TYPES)


def test_duplicate_type_rejected():
    with pytest.raises(ValidationError):
        validate_schema_types(SCHEMA_TYPES + [get_schema_type("news")])


def test_unknown_reference_rejected():
    broken = SchemaType(
        name="review",
        title="Review",
        fields=[
            SchemaField(
                name="venue",
                title="Venue",
                type=FieldType.ARRAY,
                of=[SchemaField(name="venue", title="Venue", type=FieldType.REFERENCE, to=["venue"])],
            )
        ],
    )

    with pytest.raises(ValidationError) as exc_info:
        validate_schema_types(SCHEMA_TYPES + [broken])

    assert exc_info.value.details["targets"] == ["venue"]


def test_post_references():
    post = get_schema_type("post")

    assert post.get_field("author").references() == ["author"]
    assert post.get_field("categories").references() == ["category"]
    assert post.get_field("slug").required


@pytest.mark.parametrize("document_type,tags", [
    ("event", ["events"]),
    ("artist", ["events"]),
    ("post", ["posts"]),
    ("news", ["posts"]),
    ("author", ["posts"]),
    ("category", ["posts"]),
    ("product", ["products"]),
    ("homepage", ["homepage"]),
    ("sanity.imageAsset", []),
])
def test_tags_for_document_type(document_type, tags):
    assert tags_for_document_type(document_type) == tags


def test_paths_for_document():
    assert paths_for_document("news", "summer-tour") == ["/news", "/news/summer-tour"]
    assert paths_for_document("event", None) == ["/events"]
    assert paths_for_document("homepage", None) == ["/"]
    assert paths_for_document("category", "tours") == []


def test_to_dict_export():
    exported = get_schema_type("post").to_dict()

    assert exported["name"] == "post"
    assert exported["type"] == "document"
    author = next(f for f in exported["fields"] if f["name"] == "author")
    assert author == {"name": "author", "title": "Author", "type": "reference", "to": [{"type": "author"}]}
    slug = next(f for f in exported["fields"] if f["name"] == "slug")
    assert slug["validation"] == "required"
    assert slug["options"] == {"source": "title", "maxLength": 96}
