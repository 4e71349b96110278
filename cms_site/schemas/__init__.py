from cms_site.schemas.base import PaginatedDocs, PayloadSchema
from cms_site.schemas.cms import (
    Button,
    Category,
    CategoryWithPostCount,
    DocumentStatus,
    Media,
    Post,
)
from cms_site.schemas.blocks import PayloadBlock
from cms_site.schemas.navigation import (
    Navigation,
    NavigationItem,
    NavigationMenu,
    RawNavigation,
    RawNavigationItem,
)
from cms_site.schemas.page import Page, PageMeta, RenderedBlock, RenderedPage

__all__ = [
    "PaginatedDocs",
    "PayloadSchema",
    "Button",
    "Category",
    "CategoryWithPostCount",
    "DocumentStatus",
    "Media",
    "Post",
    "PayloadBlock",
    "Navigation",
    "NavigationItem",
    "NavigationMenu",
    "RawNavigation",
    "RawNavigationItem",
    "Page",
    "PageMeta",
    "RenderedBlock",
    "RenderedPage",
]
