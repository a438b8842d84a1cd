"""Blog post document type."""

from .fields import (
    FieldType, SchemaField, SchemaType, block_content_field, image_field,
    reference_field, reference_list_field, slug_field,
)

post = SchemaType(
    name="post",
    title="Post",
    revalidate_tag="posts",
    path_prefix="/news",
    fields=[
        SchemaField(name="title", title="Title", type=FieldType.STRING, required=True),
        slug_field(),
        reference_field("author", "Author", "author"),
        image_field(),
        reference_list_field("categories", "Categories", "category"),
        SchemaField(name="publishedAt", title="Published at", type=FieldType.DATETIME, required=True),
        SchemaField(name="excerpt", title="Excerpt", type=FieldType.TEXT, options={"rows": 3}),
        block_content_field(),
    ],
)
