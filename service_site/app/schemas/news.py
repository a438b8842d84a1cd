"""News article document type."""

from .fields import (
    FieldType, SchemaField, SchemaType, block_content_field, image_field,
    reference_field, reference_list_field, slug_field,
)

news = SchemaType(
    name="news",
    title="News",
    revalidate_tag="posts",
    path_prefix="/news",
    fields=[
        SchemaField(name="title", title="Title", type=FieldType.STRING, required=True),
        slug_field(),
        SchemaField(name="excerpt", title="Excerpt", type=FieldType.TEXT, options={"rows": 3}),
        SchemaField(name="publishedAt", title="Published at", type=FieldType.DATETIME, required=True),
        image_field(),
        reference_field("author", "Author", "author"),
        reference_list_field("categories", "Categories", "category"),
        block_content_field(),
    ],
)
