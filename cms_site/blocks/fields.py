"""
Field definitions for blocks, collections and globals.

Each definition describes:
- Data type and admin label/description
- Default value and select options
- Conditional visibility (predicate over sibling values)
- Custom validation and before-validate hooks

These are pure data. The CMS admin and the site renderer interpret them;
nothing here talks to the network.
"""
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


ValidateFn = Callable[[Any, Mapping[str, Any]], Union[bool, str]]
HookFn = Callable[[Any, Mapping[str, Any], str], Any]


class FieldType(str, Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    SELECT = "select"
    RADIO = "radio"
    CHECKBOX = "checkbox"
    DATE = "date"
    ARRAY = "array"
    GROUP = "group"
    RELATIONSHIP = "relationship"
    UPLOAD = "upload"
    RICH_TEXT = "richText"
    CODE = "code"
    BLOCKS = "blocks"


class FieldOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    value: str


class FieldCondition(BaseModel):
    """Show a field only when a sibling field holds a given value."""
    model_config = ConfigDict(frozen=True)

    field: str
    equals: Any

    def __call__(self, sibling_data: Optional[Mapping[str, Any]]) -> bool:
        if not sibling_data:
            return False
        return sibling_data.get(self.field) == self.equals


class FieldDefinition(BaseModel):
    """Configuration of one field of a block, collection or global."""
    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    label: Optional[str] = None
    required: bool = False
    unique: bool = False
    index: bool = False
    default_value: Any = None
    options: Optional[List[FieldOption]] = None  # select/radio
    fields: Optional[List["FieldDefinition"]] = None  # array rows and groups
    blocks: Optional[List["BlockDefinition"]] = None  # blocks field
    relation_to: Optional[str] = None  # relationship/upload target collection
    has_many: bool = False
    min_rows: Optional[int] = None
    max_rows: Optional[int] = None
    description: Optional[str] = None
    position: Optional[str] = None  # "sidebar"
    language: Optional[str] = None  # code fields
    layout: Optional[str] = None  # radio: "horizontal"
    condition: Optional[FieldCondition] = None
    validate_fn: Optional[ValidateFn] = Field(default=None, exclude=True)
    before_validate: List[HookFn] = Field(default_factory=list, exclude=True)

    def is_visible(self, sibling_data: Optional[Mapping[str, Any]]) -> bool:
        if self.condition is None:
            return True
        return self.condition(sibling_data)

    @property
    def option_values(self) -> List[str]:
        return [option.value for option in self.options or []]


class BlockDefinition(BaseModel):
    """A page-building block: unique type tag, labels and ordered fields."""
    model_config = ConfigDict(frozen=True)

    slug: str
    singular_label: str
    plural_label: str
    fields: List[FieldDefinition]
    description: Optional[str] = None

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        for field in self.fields:
            if field.name == name:
                return field
        return None


FieldDefinition.model_rebuild()
BlockDefinition.model_rebuild()


def options(*pairs: tuple) -> List[FieldOption]:
    """Shorthand: options(("Small", "sm"), ("Large", "lg"))."""
    return [FieldOption(label=label, value=value) for label, value in pairs]


def override_default(
    fields: List[FieldDefinition],
    name: str,
    field_type: FieldType,
    value: Any,
) -> List[FieldDefinition]:
    """
    Return a copy of `fields` with one field's default value replaced.

    The field is matched by name and type. Only `default_value` changes;
    options, description and every other property stay as in the shared
    definition, and the shared list itself is left untouched.
    """
    return [
        field.model_copy(update={"default_value": value})
        if field.name == name and field.type == field_type
        else field
        for field in fields
    ]


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == []


def apply_defaults(fields: List[FieldDefinition], data: Mapping[str, Any]) -> Dict[str, Any]:
    """Fill missing values with declared defaults, recursing into groups and rows."""
    result = dict(data)
    for field in fields:
        value = result.get(field.name)
        if field.type == FieldType.GROUP and field.fields:
            result[field.name] = apply_defaults(field.fields, value or {})
        elif field.type == FieldType.ARRAY and field.fields and isinstance(value, list):
            result[field.name] = [
                apply_defaults(field.fields, row) if isinstance(row, Mapping) else row
                for row in value
            ]
        elif field.name not in result and field.default_value is not None:
            result[field.name] = field.default_value
    return result


def run_before_validate(
    fields: List[FieldDefinition],
    data: Mapping[str, Any],
    operation: str,
) -> Dict[str, Any]:
    """Run each field's before-validate hooks in order; returns new data."""
    result = dict(data)
    for field in fields:
        for hook in field.before_validate:
            result[field.name] = hook(result.get(field.name), result, operation)
    return result


def validate_fields(
    fields: List[FieldDefinition],
    data: Mapping[str, Any],
    prefix: str = "",
) -> Dict[str, str]:
    """
    Validate data against field definitions.

    Returns a mapping of field path (e.g. "items.0.question") to error message.
    Fields hidden by their condition are skipped entirely.
    """
    errors: Dict[str, str] = {}

    for field in fields:
        if not field.is_visible(data):
            continue

        path = f"{prefix}{field.name}"
        value = data.get(field.name)

        if field.validate_fn is not None:
            outcome = field.validate_fn(value, data)
            if outcome is not True:
                errors[path] = outcome if isinstance(outcome, str) else "Invalid value"
                continue

        if _is_empty(value):
            if field.required:
                errors[path] = "This field is required"
            continue

        if field.type in (FieldType.SELECT, FieldType.RADIO) and field.options:
            if value not in field.option_values:
                errors[path] = f"Invalid option: {value!r}"

        elif field.type == FieldType.GROUP and field.fields:
            if isinstance(value, Mapping):
                errors.update(validate_fields(field.fields, value, prefix=f"{path}."))
            else:
                errors[path] = "Expected an object"

        elif field.type in (FieldType.ARRAY, FieldType.BLOCKS):
            if not isinstance(value, list):
                errors[path] = "Expected a list"
                continue
            if field.min_rows is not None and len(value) < field.min_rows:
                errors[path] = f"At least {field.min_rows} row(s) required"
            elif field.max_rows is not None and len(value) > field.max_rows:
                errors[path] = f"At most {field.max_rows} row(s) allowed"
            for i, row in enumerate(value):
                row_prefix = f"{path}.{i}."
                if not isinstance(row, Mapping):
                    errors[f"{path}.{i}"] = "Expected an object"
                elif field.type == FieldType.ARRAY and field.fields:
                    errors.update(validate_fields(field.fields, row, prefix=row_prefix))
                elif field.type == FieldType.BLOCKS:
                    errors.update(_validate_block_row(field, row, row_prefix))

    return errors


def _validate_block_row(field: FieldDefinition, row: Mapping[str, Any], prefix: str) -> Dict[str, str]:
    allowed = {block.slug: block for block in field.blocks or []}
    block_type = row.get("blockType")
    block = allowed.get(block_type)
    if block is None:
        return {f"{prefix}blockType": f"Unknown block type: {block_type!r}"}
    return validate_fields(block.fields, row, prefix=prefix)
