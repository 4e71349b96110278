from typing import Any, Mapping, Union

from cms_site.blocks.fields import FieldCondition, FieldDefinition, FieldType, options
from cms_site.collections.base import GlobalDefinition


def _require_page(value: Any, sibling_data: Mapping[str, Any]) -> Union[bool, str]:
    if sibling_data.get("type") == "internal" and not value:
        return "Please select a page"
    return True


def _require_url(value: Any, sibling_data: Mapping[str, Any]) -> Union[bool, str]:
    if sibling_data.get("type") == "custom" and not value:
        return "Please enter a URL"
    return True


# Reusable link fields for navigation items
LINK_FIELDS = [
    FieldDefinition(
        name="type",
        type=FieldType.RADIO,
        options=options(("Internal Page", "internal"), ("Custom URL", "custom")),
        default_value="internal",
        layout="horizontal",
    ),
    FieldDefinition(
        name="page",
        type=FieldType.RELATIONSHIP,
        relation_to="pages",
        condition=FieldCondition(field="type", equals="internal"),
        description="Select a page to link to",
        validate_fn=_require_page,
    ),
    FieldDefinition(
        name="url",
        type=FieldType.TEXT,
        condition=FieldCondition(field="type", equals="custom"),
        description='Enter a custom URL (e.g., "/blog" or "https://example.com")',
        validate_fn=_require_url,
    ),
    FieldDefinition(
        name="label",
        type=FieldType.TEXT,
        description="Optional: Override the page title or provide a custom label",
    ),
    FieldDefinition(name="newTab", type=FieldType.CHECKBOX, label="Open in new tab", default_value=False),
]


def _menu(name: str, label: str, items_label: str) -> FieldDefinition:
    return FieldDefinition(
        name=name,
        type=FieldType.GROUP,
        label=label,
        fields=[
            FieldDefinition(name="items", type=FieldType.ARRAY, label=items_label, fields=LINK_FIELDS),
        ],
    )


NAVIGATION = GlobalDefinition(
    slug="navigation",
    label="Site Navigation",
    group="Settings",
    fields=[
        _menu("header", "Header Navigation", "Menu Items"),
        _menu("footer", "Footer Navigation", "Footer Links"),
    ],
)
