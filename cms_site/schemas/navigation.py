"""Pydantic schemas for the site navigation global."""
from typing import List, Optional, Union

from pydantic import Field

from cms_site.schemas.base import PayloadSchema


# ==================== Raw (as stored in the CMS) ====================

class NavigationPageRef(PayloadSchema):
    """The slice of a linked page the menu needs."""
    id: str
    title: str
    slug: str


class RawNavigationItem(PayloadSchema):
    type: Optional[str] = None  # "internal"; anything else links a custom URL
    page: Optional[Union[NavigationPageRef, str]] = None  # bare id when unresolved
    url: Optional[str] = None
    label: Optional[str] = None
    new_tab: bool = False


class RawNavigationMenu(PayloadSchema):
    items: List[RawNavigationItem] = Field(default_factory=list)


class RawNavigation(PayloadSchema):
    header: RawNavigationMenu = Field(default_factory=RawNavigationMenu)
    footer: RawNavigationMenu = Field(default_factory=RawNavigationMenu)


# ==================== Normalized (what the site renders) ====================

class NavigationItem(PayloadSchema):
    label: str
    href: str
    new_tab: bool = False


class NavigationMenu(PayloadSchema):
    items: List[NavigationItem] = Field(default_factory=list)


class Navigation(PayloadSchema):
    header: NavigationMenu = Field(default_factory=NavigationMenu)
    footer: NavigationMenu = Field(default_factory=NavigationMenu)
