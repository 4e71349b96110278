"""Card and grid blocks: features, statistics, team members."""
from cms_site.blocks.fields import BlockDefinition, FieldDefinition, FieldType, options
from cms_site.blocks.shared import (
    SECTION_FIELDS,
    card_variant_field,
    checkbox_field,
    columns_field,
    heading_fields,
)


FEATURE1_BLOCK = BlockDefinition(
    slug="feature1",
    singular_label="Features Grid",
    plural_label="Features Grids",
    fields=[
        *heading_fields(),
        FieldDefinition(
            name="features",
            type=FieldType.ARRAY,
            required=True,
            min_rows=1,
            max_rows=12,
            fields=[
                FieldDefinition(
                    name="icon",
                    type=FieldType.TEXT,
                    description='Emoji or symbol (e.g., "✦", "◈")',
                ),
                FieldDefinition(name="title", type=FieldType.TEXT, required=True),
                FieldDefinition(name="description", type=FieldType.TEXTAREA, required=True),
            ],
        ),
        columns_field(("2", "3", "4"), default="3"),
        card_variant_field(default="outlined"),
        checkbox_field("centerHeading", "Center section heading", True),
        checkbox_field("centerCards", "Center card content", True),
        *SECTION_FIELDS,
    ],
)


STATS1_BLOCK = BlockDefinition(
    slug="stats1",
    singular_label="Statistics",
    plural_label="Statistics Sections",
    fields=[
        *heading_fields(),
        FieldDefinition(
            name="stats",
            type=FieldType.ARRAY,
            required=True,
            min_rows=2,
            max_rows=8,
            fields=[
                FieldDefinition(
                    name="value",
                    type=FieldType.TEXT,
                    required=True,
                    description='The number or value (e.g., "100+", "99%")',
                ),
                FieldDefinition(
                    name="label",
                    type=FieldType.TEXT,
                    required=True,
                    description="Description of the stat",
                ),
            ],
        ),
        columns_field(("2", "3", "4"), default="4"),
        checkbox_field("centered", "Center content", True),
        *SECTION_FIELDS,
    ],
)


TEAM1_BLOCK = BlockDefinition(
    slug="team1",
    singular_label="Team",
    plural_label="Team Sections",
    fields=[
        *heading_fields(),
        FieldDefinition(
            name="members",
            type=FieldType.ARRAY,
            required=True,
            min_rows=1,
            max_rows=12,
            fields=[
                FieldDefinition(name="name", type=FieldType.TEXT, required=True),
                FieldDefinition(name="role", type=FieldType.TEXT, required=True),
                FieldDefinition(name="image", type=FieldType.UPLOAD, relation_to="media"),
                FieldDefinition(name="bio", type=FieldType.TEXTAREA),
            ],
        ),
        columns_field(("2", "3", "4"), default="4"),
        FieldDefinition(
            name="avatarSize",
            type=FieldType.SELECT,
            options=options(("Medium", "md"), ("Large", "lg"), ("Extra Large", "xl")),
            default_value="xl",
        ),
        checkbox_field("centered", "Center content", True),
        *SECTION_FIELDS,
    ],
)
