"""Artist document type."""

from .fields import FieldType, SchemaField, SchemaType, block_content_field, image_field, slug_field

artist = SchemaType(
    name="artist",
    title="Artist",
    revalidate_tag="events",
    path_prefix="/artists",
    fields=[
        SchemaField(name="name", title="Name", type=FieldType.STRING, required=True),
        slug_field("name"),
        image_field("image", "Image"),
        SchemaField(
            name="genres",
            title="Genres",
            type=FieldType.ARRAY,
            of=[SchemaField(name="genre", title="Genre", type=FieldType.STRING)],
            options={"layout": "tags"},
        ),
        SchemaField(
            name="socialLinks",
            title="Social links",
            type=FieldType.ARRAY,
            of=[SchemaField(name="link", title="Link", type=FieldType.URL)],
        ),
        block_content_field("bio", "Bio"),
    ],
)
