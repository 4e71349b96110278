"""Pydantic schemas for pages and the rendered-page view."""
from datetime import datetime
from typing import List, Optional, Union

from pydantic import Field

from cms_site.schemas.base import PayloadSchema
from cms_site.schemas.blocks import PayloadBlock
from cms_site.schemas.cms import CategoryWithPostCount, DocumentStatus, Media, Post
from cms_site.schemas.navigation import Navigation


class PageMeta(PayloadSchema):
    """SEO overrides."""
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[Union[Media, str]] = None


class Page(PayloadSchema):
    id: str
    title: str
    slug: str
    blocks: List[PayloadBlock] = Field(default_factory=list)
    meta: Optional[PageMeta] = None
    status: DocumentStatus = DocumentStatus.PUBLISHED
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class RenderedBlock(PayloadSchema):
    """A block plus the content it pulls in at render time."""
    block: PayloadBlock
    posts: Optional[List[Post]] = None
    categories: Optional[List[CategoryWithPostCount]] = None


class RenderedPage(PayloadSchema):
    page: Page
    blocks: List[RenderedBlock]
    navigation: Navigation
