"""Author document type."""

from .fields import FieldType, SchemaField, SchemaType, image_field, slug_field

author = SchemaType(
    name="author",
    title="Author",
    revalidate_tag="posts",
    fields=[
        SchemaField(name="name", title="Name", type=FieldType.STRING, required=True),
        slug_field("name"),
        image_field("image", "Image"),
        SchemaField(name="bio", title="Bio", type=FieldType.TEXT),
    ],
)
