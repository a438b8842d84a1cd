"""Category document type."""

from .fields import FieldType, SchemaField, SchemaType

category = SchemaType(
    name="category",
    title="Category",
    revalidate_tag="posts",
    fields=[
        SchemaField(name="title", title="Title", type=FieldType.STRING, required=True),
        SchemaField(name="description", title="Description", type=FieldType.TEXT),
    ],
)
