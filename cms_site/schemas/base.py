"""
Base Schema Classes for Pydantic Models

Payload CMS speaks camelCase JSON (`heroImage`, `pubDate`, `blockType`).
These base classes map it to snake_case attributes and back.

RULE: All schemas that read content API documents MUST inherit from PayloadSchema.
"""

from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class PayloadSchema(BaseModel):
    """
    Base class for all schemas mirroring content API documents.

    Features:
    - camelCase aliases generated from snake_case field names
    - Population by field name or alias (tests and internal code use snake_case)
    - Unknown keys (createdBy, _status, blockName...) are ignored

    Usage:
        class CategoryResponse(PayloadSchema):
            id: str
            name: str
            post_count: int = 0      # wire name: postCount
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra='ignore',
        # Numeric ids (SQL adapters) and select values compare as strings
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        """Payload sends null for unset fields; treat them as missing so defaults apply."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class PaginatedDocs(PayloadSchema, Generic[T]):
    """Pagination envelope returned by every collection query."""
    docs: List[T]
    total_docs: int = 0
    limit: int = 0
    total_pages: int = 1
    page: int = 1
    paging_counter: int = 1
    has_prev_page: bool = False
    has_next_page: bool = False
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    def first(self) -> Optional[T]:
        return self.docs[0] if self.docs else None
