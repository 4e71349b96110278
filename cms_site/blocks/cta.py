from cms_site.blocks.fields import (
    BlockDefinition,
    FieldDefinition,
    FieldType,
    options,
    override_default,
)
from cms_site.blocks.shared import BUTTON_FIELD, SECTION_FIELDS


CTA1_BLOCK = BlockDefinition(
    slug="cta1",
    singular_label="CTA (Centered)",
    plural_label="CTA Sections",
    fields=[
        FieldDefinition(name="heading", type=FieldType.TEXT, required=True),
        FieldDefinition(name="description", type=FieldType.TEXTAREA),
        FieldDefinition(
            name="align",
            type=FieldType.SELECT,
            options=options(("Center", "center"), ("Left", "left")),
            default_value="center",
        ),
        BUTTON_FIELD,
        *override_default(SECTION_FIELDS, "background", FieldType.SELECT, "primary"),
    ],
)


CTA2_BLOCK = BlockDefinition(
    slug="cta2",
    singular_label="CTA (With Image)",
    plural_label="CTA With Image Sections",
    fields=[
        FieldDefinition(name="heading", type=FieldType.TEXT, required=True),
        FieldDefinition(name="description", type=FieldType.TEXTAREA),
        FieldDefinition(
            name="image",
            type=FieldType.UPLOAD,
            relation_to="media",
            description="Image displayed beside the content",
        ),
        FieldDefinition(
            name="reverse",
            type=FieldType.CHECKBOX,
            label="Reverse layout (image on left)",
            default_value=False,
        ),
        FieldDefinition(
            name="verticalAlign",
            type=FieldType.SELECT,
            options=options(("Top", "start"), ("Center", "center"), ("Bottom", "end")),
            default_value="center",
        ),
        BUTTON_FIELD,
        *override_default(SECTION_FIELDS, "background", FieldType.SELECT, "muted"),
    ],
)
