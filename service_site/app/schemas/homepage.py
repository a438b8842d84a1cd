"""Homepage singleton document type."""

from .fields import FieldType, SchemaField, SchemaType, image_field, reference_list_field

homepage = SchemaType(
    name="homepage",
    title="Homepage",
    revalidate_tag="homepage",
    fields=[
        SchemaField(name="heroTitle", title="Hero title", type=FieldType.STRING, required=True),
        SchemaField(name="heroSubtitle", title="Hero subtitle", type=FieldType.TEXT),
        image_field("heroImage", "Hero image"),
        SchemaField(name="ctaLabel", title="Call to action label", type=FieldType.STRING),
        SchemaField(name="ctaUrl", title="Call to action URL", type=FieldType.URL),
        reference_list_field("featuredEvents", "Featured events", "event"),
        reference_list_field("featuredArtists", "Featured artists", "artist"),
    ],
)
