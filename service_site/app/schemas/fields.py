"""
Declarative building blocks for CMS content-type definitions.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FieldType(str, Enum):
    """Field types understood by the CMS editing tooling."""
    STRING = "string"
    TEXT = "text"
    SLUG = "slug"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    DATE = "date"
    URL = "url"
    IMAGE = "image"
    ARRAY = "array"
    BLOCK = "block"
    REFERENCE = "reference"
    OBJECT = "object"


@dataclass
class SchemaField:
    """A single field of a content type."""
    name: str
    title: str
    type: FieldType
    required: bool = False
    description: Optional[str] = None
    # Member types of an array field
    of: List["SchemaField"] = field(default_factory=list)
    # Target document types of a reference field
    to: List[str] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)
    fields: List["SchemaField"] = field(default_factory=list)

    def references(self) -> List[str]:
        """Every document type this field (or its members) can point at."""
        targets = list(self.to)
        for member in self.of + self.fields:
            targets.extend(member.references())
        return targets

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "title": self.title, "type": self.type.value}
        if self.required:
            data["validation"] = "required"
        if self.description:
            data["description"] = self.description
        if self.of:
            data["of"] = [member.to_dict() for member in self.of]
        if self.to:
            data["to"] = [{"type": target} for target in self.to]
        if self.options:
            data["options"] = dict(self.options)
        if self.fields:
            data["fields"] = [member.to_dict() for member in self.fields]
        return data


@dataclass
class SchemaType:
    """A document type registered with the CMS."""
    name: str
    title: str
    fields: List[SchemaField]
    type: str = "document"
    # Cache tag refreshed when a document of this type changes
    revalidate_tag: Optional[str] = None
    # Public page prefix for documents with a slug
    path_prefix: Optional[str] = None

    def get_field(self, name: str) -> Optional[SchemaField]:
        return next((f for f in self.fields if f.name == name), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "type": self.type,
            "fields": [f.to_dict() for f in self.fields],
        }


def slug_field(source: str = "title") -> SchemaField:
    return SchemaField(
        name="slug",
        title="Slug",
        type=FieldType.SLUG,
        required=True,
        options={"source": source, "maxLength": 96},
    )


def image_field(name: str = "mainImage", title: str = "Main image") -> SchemaField:
    return SchemaField(
        name=name,
        title=title,
        type=FieldType.IMAGE,
        options={"hotspot": True},
        fields=[SchemaField(name="alt", title="Alternative text", type=FieldType.STRING)],
    )


def block_content_field(name: str = "body", title: str = "Body") -> SchemaField:
    return SchemaField(
        name=name,
        title=title,
        type=FieldType.ARRAY,
        of=[
            SchemaField(name="block", title="Block", type=FieldType.BLOCK),
            SchemaField(name="image", title="Image", type=FieldType.IMAGE, options={"hotspot": True}),
        ],
    )


def reference_field(name: str, title: str, target: str, required: bool = False) -> SchemaField:
    return SchemaField(name=name, title=title, type=FieldType.REFERENCE, to=[target], required=required)


def reference_list_field(name: str, title: str, target: str) -> SchemaField:
    return SchemaField(
        name=name,
        title=title,
        type=FieldType.ARRAY,
        of=[SchemaField(name=target, title=title, type=FieldType.REFERENCE, to=[target])],
    )
