"""Pydantic schemas for CMS collections (media, categories, posts)."""
from datetime import datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import Field

from cms_site.schemas.base import PayloadSchema


# ==================== Enums ====================

class DocumentStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"


class ButtonVariant(str, Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    GHOST = "ghost"


# ==================== Media ====================

class Media(PayloadSchema):
    """Uploaded asset. `url` may be relative to the CMS origin."""
    id: str
    alt: str = ""
    caption: Optional[str] = None
    url: Optional[str] = None
    filename: Optional[str] = None
    mime_type: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None


# ==================== Categories ====================

class Category(PayloadSchema):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    color: Optional[str] = Field(None, description='CSS color for the badge, e.g. "#6366f1"')


class CategoryWithPostCount(Category):
    post_count: int = 0


# ==================== Posts ====================

class Post(PayloadSchema):
    """Blog post. Relationships arrive embedded or as bare ids depending on depth."""
    id: str
    title: str
    slug: str
    description: str = ""
    hero_image: Optional[Union[Media, str]] = None
    category: Optional[Union[Category, str]] = None
    author: str = "Admin"
    pub_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None
    content: Any = None  # Lexical rich text JSON
    status: DocumentStatus = DocumentStatus.PUBLISHED

    @property
    def category_id(self) -> Optional[str]:
        if isinstance(self.category, Category):
            return self.category.id
        return self.category


# ==================== Shared ====================

class Button(PayloadSchema):
    label: Optional[str] = None
    href: Optional[str] = None
    variant: ButtonVariant = ButtonVariant.PRIMARY
