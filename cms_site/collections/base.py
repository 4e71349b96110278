"""
Collection and global definitions.

Same field DSL as the block catalog. Used for schema introspection and to
prepare/validate documents the way the CMS does before they are saved.
"""
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict

from cms_site.blocks.fields import (
    FieldDefinition,
    FieldType,
    apply_defaults,
    options,
    run_before_validate,
    validate_fields,
)
from cms_site.utils.slug import slug_hook


class CollectionDefinition(BaseModel):
    """A named set of documents of one entity type."""
    model_config = ConfigDict(frozen=True)

    slug: str
    fields: List[FieldDefinition]
    use_as_title: Optional[str] = None
    group: Optional[str] = None
    default_columns: List[str] = []
    drafts: bool = False
    live_preview_path: Optional[str] = None  # e.g. "/preview/blog/{slug}"

    def get_field(self, name: str) -> Optional[FieldDefinition]:
        for field in self.fields:
            if field.name == name:
                return field
        return None

    def prepare(
        self,
        data: Mapping[str, Any],
        operation: str,
        original: Optional[Mapping[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Run before-validate hooks and fill defaults.

        On update the incoming data is merged over the stored document first,
        so hooks see the full document.
        """
        if operation not in ("create", "update"):
            raise ValueError(f"Unsupported operation: {operation}")
        merged = {**(original or {}), **data} if operation == "update" else dict(data)
        prepared = run_before_validate(self.fields, merged, operation)
        if operation == "create":
            prepared = apply_defaults(self.fields, prepared)
        return prepared

    def validate_document(self, data: Mapping[str, Any]) -> Dict[str, str]:
        return validate_fields(self.fields, data)


class GlobalDefinition(BaseModel):
    """A singleton document (e.g. site navigation)."""
    model_config = ConfigDict(frozen=True)

    slug: str
    label: str
    fields: List[FieldDefinition]
    group: Optional[str] = None

    def validate_document(self, data: Mapping[str, Any]) -> Dict[str, str]:
        return validate_fields(self.fields, data)


def slug_field(field_to_use: str = "title") -> FieldDefinition:
    """
    A unique slug field that auto-generates from another field.

        fields=[
            FieldDefinition(name="title", type=FieldType.TEXT, required=True),
            slug_field("title"),
        ]
    """
    return FieldDefinition(
        name="slug",
        type=FieldType.TEXT,
        unique=True,
        index=True,
        position="sidebar",
        description="Auto-generated from title. You can edit if needed.",
        before_validate=[slug_hook(field_to_use)],
    )


def status_field() -> FieldDefinition:
    return FieldDefinition(
        name="status",
        type=FieldType.SELECT,
        options=options(("Draft", "draft"), ("Published", "published")),
        default_value="draft",
        required=True,
        position="sidebar",
    )
