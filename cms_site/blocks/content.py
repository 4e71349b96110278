from cms_site.blocks.fields import (
    BlockDefinition,
    FieldCondition,
    FieldDefinition,
    FieldType,
    options,
)
from cms_site.blocks.shared import BUTTON_FIELD, SECTION_FIELDS


LAYOUT1_BLOCK = BlockDefinition(
    slug="layout1",
    singular_label="Two Column Layout",
    plural_label="Two Column Layouts",
    fields=[
        FieldDefinition(name="tagline", type=FieldType.TEXT, description="Small text above heading"),
        FieldDefinition(name="heading", type=FieldType.TEXT, required=True),
        FieldDefinition(name="description", type=FieldType.TEXTAREA),
        FieldDefinition(
            name="contentText",
            type=FieldType.RICH_TEXT,
            description="Additional content below description",
        ),
        FieldDefinition(
            name="mediaType",
            type=FieldType.SELECT,
            options=options(("Image", "image"), ("Code Block", "code")),
            default_value="image",
        ),
        FieldDefinition(
            name="image",
            type=FieldType.UPLOAD,
            relation_to="media",
            condition=FieldCondition(field="mediaType", equals="image"),
        ),
        FieldDefinition(
            name="codeBlock",
            type=FieldType.CODE,
            language="css",
            condition=FieldCondition(field="mediaType", equals="code"),
        ),
        FieldDefinition(
            name="reverse",
            type=FieldType.CHECKBOX,
            label="Reverse layout (media on left)",
            default_value=False,
        ),
        BUTTON_FIELD,
        *SECTION_FIELDS,
    ],
)


SECTION_BLOCK = BlockDefinition(
    slug="section",
    singular_label="Content Section",
    plural_label="Content Sections",
    fields=[
        FieldDefinition(
            name="content",
            type=FieldType.RICH_TEXT,
            required=True,
            description="Section content with rich text formatting",
        ),
        FieldDefinition(
            name="centerContent",
            type=FieldType.CHECKBOX,
            label="Center content",
            default_value=True,
        ),
        FieldDefinition(
            name="maxWidth",
            type=FieldType.SELECT,
            options=options(
                ("Narrow (65ch)", "narrow"),
                ("Medium (80ch)", "medium"),
                ("Wide (100%)", "wide"),
            ),
            default_value="narrow",
        ),
        *SECTION_FIELDS,
    ],
)
