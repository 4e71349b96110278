from cms_site.blocks.fields import BlockDefinition, FieldDefinition, FieldType, options
from cms_site.blocks.shared import BUTTON_FIELD, SECTION_FIELDS


HERO1_BLOCK = BlockDefinition(
    slug="hero1",
    singular_label="Hero (Centered)",
    plural_label="Hero Sections",
    fields=[
        FieldDefinition(name="tagline", type=FieldType.TEXT, description="Small badge text above heading"),
        FieldDefinition(
            name="heading",
            type=FieldType.TEXT,
            required=True,
            description="Main headline (use <br /> for line breaks)",
        ),
        FieldDefinition(name="description", type=FieldType.TEXTAREA, description="Subheading text"),
        FieldDefinition(
            name="align",
            type=FieldType.SELECT,
            options=options(("Center", "center"), ("Left", "left")),
            default_value="center",
        ),
        FieldDefinition(
            name="contentWidth",
            type=FieldType.SELECT,
            options=options(("Narrow", "narrow"), ("Medium", "medium"), ("Wide", "wide")),
            default_value="medium",
        ),
        BUTTON_FIELD,
        FieldDefinition(
            name="media",
            type=FieldType.UPLOAD,
            relation_to="media",
            description="Optional hero image",
        ),
        *SECTION_FIELDS,
    ],
)
