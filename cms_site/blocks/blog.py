"""Blocks that pull posts and categories from the content API at render time."""
from cms_site.blocks.fields import (
    BlockDefinition,
    FieldCondition,
    FieldDefinition,
    FieldType,
    options,
)
from cms_site.blocks.shared import (
    SECTION_FIELDS,
    card_variant_field,
    checkbox_field,
    columns_field,
    heading_fields,
)


BLOG1_BLOCK = BlockDefinition(
    slug="blog1",
    singular_label="Blog Posts Grid",
    plural_label="Blog Posts Grids",
    fields=[
        *heading_fields(),
        FieldDefinition(
            name="postSource",
            type=FieldType.SELECT,
            options=options(
                ("Latest Posts", "latest"),
                ("By Category", "category"),
                ("Specific Posts", "specific"),
            ),
            default_value="latest",
            description="How to select which posts to display",
        ),
        FieldDefinition(
            name="category",
            type=FieldType.RELATIONSHIP,
            relation_to="categories",
            condition=FieldCondition(field="postSource", equals="category"),
            description="Select category to filter posts",
        ),
        FieldDefinition(
            name="posts",
            type=FieldType.RELATIONSHIP,
            relation_to="posts",
            has_many=True,
            condition=FieldCondition(field="postSource", equals="specific"),
            description="Select specific posts to display",
        ),
        FieldDefinition(
            name="limit",
            type=FieldType.NUMBER,
            default_value=6,
            description="Maximum number of posts to display",
        ),
        columns_field(("2", "3"), default="3"),
        card_variant_field(default="elevated"),
        checkbox_field("centerHeading", "Center section heading", False),
        *SECTION_FIELDS,
    ],
)


CATEGORY_GRID1_BLOCK = BlockDefinition(
    slug="categoryGrid1",
    singular_label="Category Grid",
    plural_label="Category Grids",
    fields=[
        *heading_fields(),
        FieldDefinition(
            name="categorySource",
            type=FieldType.SELECT,
            options=options(("All Categories", "all"), ("Specific Categories", "specific")),
            default_value="all",
            description="How to select which categories to display",
        ),
        FieldDefinition(
            name="categories",
            type=FieldType.RELATIONSHIP,
            relation_to="categories",
            has_many=True,
            condition=FieldCondition(field="categorySource", equals="specific"),
            description="Select specific categories to display",
        ),
        checkbox_field(
            "showPostCount",
            "Show post count",
            True,
            description="Display the number of posts in each category",
        ),
        columns_field(("2", "3"), default="2"),
        card_variant_field(default="outlined"),
        checkbox_field("centerHeading", "Center section heading", False),
        *SECTION_FIELDS,
    ],
)
