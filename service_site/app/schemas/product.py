"""Merchandise product document type."""

from .fields import FieldType, SchemaField, SchemaType, block_content_field, image_field, slug_field

product = SchemaType(
    name="product",
    title="Product",
    revalidate_tag="products",
    path_prefix="/shop",
    fields=[
        SchemaField(name="name", title="Name", type=FieldType.STRING, required=True),
        slug_field("name"),
        SchemaField(name="price", title="Price", type=FieldType.NUMBER, required=True),
        SchemaField(
            name="images",
            title="Images",
            type=FieldType.ARRAY,
            of=[image_field("image", "Image")],
        ),
        SchemaField(
            name="sizes",
            title="Sizes",
            type=FieldType.ARRAY,
            of=[SchemaField(name="size", title="Size", type=FieldType.STRING)],
            options={"list": ["XS", "S", "M", "L", "XL", "XXL"]},
        ),
        SchemaField(name="inStock", title="In stock", type=FieldType.BOOLEAN, options={"initialValue": True}),
        block_content_field("description", "Description"),
    ],
)
