from cms_site.blocks.fields import FieldDefinition, FieldType
from cms_site.collections.base import CollectionDefinition


# Upload storage itself belongs to the CMS; only the editable fields live here
MEDIA = CollectionDefinition(
    slug="media",
    use_as_title="alt",
    fields=[
        FieldDefinition(name="alt", type=FieldType.TEXT, required=True),
        FieldDefinition(name="caption", type=FieldType.TEXT),
    ],
)
