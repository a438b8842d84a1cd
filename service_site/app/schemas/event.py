"""Event document type."""

from .fields import (
    FieldType, SchemaField, SchemaType, block_content_field, image_field, reference_list_field, slug_field,
)

event = SchemaType(
    name="event",
    title="Event",
    revalidate_tag="events",
    path_prefix="/events",
    fields=[
        SchemaField(name="title", title="Title", type=FieldType.STRING, required=True),
        slug_field(),
        SchemaField(name="date", title="Date", type=FieldType.DATETIME, required=True),
        SchemaField(name="venue", title="Venue", type=FieldType.STRING),
        SchemaField(name="location", title="Location", type=FieldType.STRING),
        image_field("image", "Event image"),
        SchemaField(name="ticketUrl", title="Ticket URL", type=FieldType.URL),
        SchemaField(name="price", title="Price", type=FieldType.STRING),
        SchemaField(name="featured", title="Featured", type=FieldType.BOOLEAN, options={"initialValue": False}),
        reference_list_field("artists", "Artists", "artist"),
        block_content_field("description", "Description"),
    ],
)
