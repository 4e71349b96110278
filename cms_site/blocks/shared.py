"""Field groups spliced into several block definitions."""
from cms_site.blocks.fields import FieldDefinition, FieldType, options


_PADDING_OPTIONS = options(
    ("Default", ""),
    ("None", "none"),
    ("Small", "sm"),
    ("Medium", "md"),
    ("Large", "lg"),
)


# Section layout fields every block inherits (maps to the Section organism)
SECTION_FIELDS = [
    FieldDefinition(
        name="size",
        type=FieldType.SELECT,
        options=options(("Small", "sm"), ("Medium", "md"), ("Large", "lg")),
        default_value="md",
        description="Vertical padding size",
    ),
    FieldDefinition(
        name="paddingTop",
        type=FieldType.SELECT,
        options=_PADDING_OPTIONS,
        description="Override top padding",
    ),
    FieldDefinition(
        name="paddingBottom",
        type=FieldType.SELECT,
        options=_PADDING_OPTIONS,
        description="Override bottom padding",
    ),
    FieldDefinition(
        name="background",
        type=FieldType.SELECT,
        options=options(
            ("Default (White)", "default"),
            ("Muted (Gray)", "muted"),
            ("Primary (Brand)", "primary"),
            ("Dark", "dark"),
        ),
        default_value="default",
    ),
]


BUTTON_FIELD = FieldDefinition(
    name="buttons",
    type=FieldType.ARRAY,
    label="Buttons",
    max_rows=3,
    fields=[
        FieldDefinition(name="label", type=FieldType.TEXT, required=True),
        FieldDefinition(name="href", type=FieldType.TEXT, required=True),
        FieldDefinition(
            name="variant",
            type=FieldType.SELECT,
            options=options(("Primary", "primary"), ("Secondary", "secondary"), ("Ghost", "ghost")),
            default_value="primary",
        ),
    ],
)


def heading_fields(description: str = "Section heading") -> list:
    """Title + subtitle pair used by the grid blocks."""
    return [
        FieldDefinition(name="title", type=FieldType.TEXT, description=description),
        FieldDefinition(name="subtitle", type=FieldType.TEXTAREA, description="Section subheading"),
    ]


def columns_field(values: tuple, default: str) -> FieldDefinition:
    return FieldDefinition(
        name="columns",
        type=FieldType.SELECT,
        options=options(*[(f"{value} Columns", value) for value in values]),
        default_value=default,
    )


def card_variant_field(default: str) -> FieldDefinition:
    return FieldDefinition(
        name="cardVariant",
        type=FieldType.SELECT,
        options=options(
            ("Elevated (Shadow)", "elevated"),
            ("Outlined (Border)", "outlined"),
            ("Filled (Background)", "filled"),
        ),
        default_value=default,
    )


def checkbox_field(name: str, label: str, default: bool, description: str = None) -> FieldDefinition:
    return FieldDefinition(
        name=name,
        type=FieldType.CHECKBOX,
        label=label,
        default_value=default,
        description=description,
    )
