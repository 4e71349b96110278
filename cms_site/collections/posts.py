from cms_site.blocks.fields import FieldDefinition, FieldType
from cms_site.collections.base import CollectionDefinition, slug_field, status_field


POSTS = CollectionDefinition(
    slug="posts",
    use_as_title="title",
    group="Content",
    default_columns=["title", "category", "pubDate", "status"],
    drafts=True,
    live_preview_path="/preview/blog/{slug}",
    fields=[
        FieldDefinition(name="title", type=FieldType.TEXT, required=True),
        slug_field("title"),
        FieldDefinition(
            name="description",
            type=FieldType.TEXTAREA,
            required=True,
            description="Short summary for SEO and previews",
        ),
        FieldDefinition(name="heroImage", type=FieldType.UPLOAD, relation_to="media"),
        FieldDefinition(
            name="category",
            type=FieldType.RELATIONSHIP,
            relation_to="categories",
            required=True,
        ),
        FieldDefinition(name="author", type=FieldType.TEXT, default_value="Admin"),
        FieldDefinition(name="pubDate", type=FieldType.DATE, required=True),
        FieldDefinition(name="updatedDate", type=FieldType.DATE),
        FieldDefinition(name="content", type=FieldType.RICH_TEXT, required=True),
        status_field(),
    ],
)
