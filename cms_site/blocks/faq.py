from cms_site.blocks.fields import (
    BlockDefinition,
    FieldCondition,
    FieldDefinition,
    FieldType,
    options,
)
from cms_site.blocks.shared import BUTTON_FIELD, SECTION_FIELDS, checkbox_field


# Single-column accordion with an optional "Still have questions?" CTA
FAQ1_BLOCK = BlockDefinition(
    slug="faq1",
    singular_label="FAQ Section",
    plural_label="FAQ Sections",
    description="Accordion of questions and answers with an optional bottom CTA",
    fields=[
        # Header
        FieldDefinition(
            name="title",
            type=FieldType.TEXT,
            default_value="FAQs",
            description='Section heading (e.g., "FAQs", "Frequently Asked Questions")',
        ),
        FieldDefinition(
            name="subtitle",
            type=FieldType.TEXTAREA,
            description="Optional section description below the heading",
        ),

        # Items
        FieldDefinition(
            name="items",
            type=FieldType.ARRAY,
            label="FAQ Items",
            required=True,
            min_rows=1,
            max_rows=20,
            description="Questions and answers for the accordion",
            fields=[
                FieldDefinition(
                    name="question",
                    type=FieldType.TEXT,
                    required=True,
                    description="The question text",
                ),
                FieldDefinition(
                    name="answer",
                    type=FieldType.TEXTAREA,
                    required=True,
                    description="The answer text (supports line breaks)",
                ),
            ],
        ),

        # Bottom CTA
        checkbox_field(
            "showBottomCta",
            "Show bottom CTA section",
            True,
            description='Display a "Still have questions?" section below the FAQs',
        ),
        FieldDefinition(
            name="bottomCta",
            type=FieldType.GROUP,
            condition=FieldCondition(field="showBottomCta", equals=True),
            fields=[
                FieldDefinition(name="heading", type=FieldType.TEXT, default_value="Still have questions?"),
                FieldDefinition(name="description", type=FieldType.TEXTAREA),
                BUTTON_FIELD,
            ],
        ),

        # Layout
        checkbox_field("centerHeading", "Center section heading", True),
        FieldDefinition(
            name="maxWidth",
            type=FieldType.SELECT,
            options=options(
                ("Small (560px)", "small"),
                ("Medium (768px)", "medium"),
                ("Large (1024px)", "large"),
            ),
            default_value="medium",
            description="Maximum width of the FAQ accordion",
        ),
        checkbox_field("defaultOpenFirst", "Open first item by default", False),
        checkbox_field(
            "allowMultipleOpen",
            "Allow multiple items open at once",
            False,
            description="If unchecked, opening one item closes others",
        ),
        *SECTION_FIELDS,
    ],
)
