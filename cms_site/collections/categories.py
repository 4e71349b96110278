from cms_site.blocks.fields import FieldDefinition, FieldType
from cms_site.collections.base import CollectionDefinition, slug_field


CATEGORIES = CollectionDefinition(
    slug="categories",
    use_as_title="name",
    group="Content",
    fields=[
        FieldDefinition(name="name", type=FieldType.TEXT, required=True),
        slug_field("name"),
        FieldDefinition(name="description", type=FieldType.TEXTAREA),
        FieldDefinition(
            name="color",
            type=FieldType.TEXT,
            description='CSS color value for category badge (e.g., "#6366f1")',
        ),
    ],
)
