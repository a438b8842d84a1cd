"""
CMS schema definitions.

``SCHEMA_TYPES`` is the fixed list registered with the CMS editing
tooling. The site itself only reads it to map changed documents to cache
tags and page paths.
"""

from typing import Dict, Iterable, List, Optional, Sequence

from shared.errors import ValidationError

from .artist import artist
from .author import author
from .category import category
from .event import event
from .fields import FieldType, SchemaField, SchemaType
from .homepage import homepage
from .news import news
from .post import post
from .product import product

SCHEMA_TYPES: List[SchemaType] = [homepage, event, post, author, category, product, artist, news]


def validate_schema_types(types: Sequence[SchemaType]) -> None:
    """Check names are unique and every reference targets a registered type."""
    seen: Dict[str, SchemaType] = {}
    for schema_type in types:
        if schema_type.name in seen:
            raise ValidationError(
                f"Duplicate schema type: {schema_type.name}",
                details={"type": schema_type.name}
            )
        seen[schema_type.name] = schema_type

    for schema_type in types:
        for schema_field in schema_type.fields:
            missing = [target for target in schema_field.references() if target not in seen]
            if missing:
                raise ValidationError(
                    f"Unknown reference target in {schema_type.name}.{schema_field.name}",
                    details={"type": schema_type.name, "field": schema_field.name, "targets": missing}
                )


def get_schema_type(name: str, types: Iterable[SchemaType] = SCHEMA_TYPES) -> Optional[SchemaType]:
    return next((schema_type for schema_type in types if schema_type.name == name), None)


def tags_for_document_type(name: str) -> List[str]:
    """Cache tags to refresh when a document of this type changes."""
    schema_type = get_schema_type(name)
    if schema_type is None or schema_type.revalidate_tag is None:
        return []
    return [schema_type.revalidate_tag]


def paths_for_document(name: str, slug: Optional[str]) -> List[str]:
    """Public page paths backed by a document."""
    if name == "homepage":
        return ["/"]

    schema_type = get_schema_type(name)
    if schema_type is None or schema_type.path_prefix is None:
        return []

    paths = [schema_type.path_prefix]
    if slug:
        paths.append(f"{schema_type.path_prefix}/{slug}")
    return paths


__all__ = [
    "SCHEMA_TYPES",
    "FieldType",
    "SchemaField",
    "SchemaType",
    "validate_schema_types",
    "get_schema_type",
    "tags_for_document_type",
    "paths_for_document",
]
