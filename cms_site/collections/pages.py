from cms_site.blocks import ALL_BLOCKS
from cms_site.blocks.fields import FieldDefinition, FieldType
from cms_site.collections.base import CollectionDefinition, slug_field, status_field


PAGES = CollectionDefinition(
    slug="pages",
    use_as_title="title",
    group="Content",
    default_columns=["title", "slug", "status", "updatedAt"],
    drafts=True,
    live_preview_path="/preview/{slug}",
    fields=[
        FieldDefinition(name="title", type=FieldType.TEXT, required=True),
        slug_field("title"),
        FieldDefinition(
            name="blocks",
            type=FieldType.BLOCKS,
            blocks=ALL_BLOCKS,
            required=True,
            min_rows=1,
            description="Build your page by adding and arranging blocks",
        ),
        # SEO tab
        FieldDefinition(
            name="meta",
            type=FieldType.GROUP,
            fields=[
                FieldDefinition(
                    name="title",
                    type=FieldType.TEXT,
                    description="Override the page title for SEO",
                ),
                FieldDefinition(
                    name="description",
                    type=FieldType.TEXTAREA,
                    description="Meta description for search engines",
                ),
                FieldDefinition(
                    name="image",
                    type=FieldType.UPLOAD,
                    relation_to="media",
                    description="Social sharing image",
                ),
            ],
        ),
        status_field(),
    ],
)
