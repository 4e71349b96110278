"""
Site navigation: turns the raw navigation global into header/footer menus.

Raw entries are either internal (a page reference) or custom (a literal URL).
Entries that cannot produce a link are dropped, never raised.
"""
import logging
from typing import Any, Iterable, List, Mapping, Optional

from cms_site.core.exceptions import PayloadError
from cms_site.schemas.navigation import (
    Navigation,
    NavigationItem,
    NavigationMenu,
    NavigationPageRef,
    RawNavigation,
    RawNavigationItem,
)
from cms_site.services.payload_client import PayloadClient

logger = logging.getLogger(__name__)

HOME_SLUG = "home"


def page_href(slug: str) -> str:
    """The home page lives at the site root."""
    return "/" if slug == HOME_SLUG else f"/{slug}"


def transform_nav_item(item: RawNavigationItem) -> Optional[NavigationItem]:
    """Normalize one raw entry, or None when it has nothing to link to."""
    if item.type == "internal":
        # A bare id means the page was not resolved (deleted or beyond depth)
        if not isinstance(item.page, NavigationPageRef):
            return None
        href = page_href(item.page.slug)
        label = item.label or item.page.title
    else:
        if not item.url:
            return None
        href = item.url
        label = item.label or item.url

    return NavigationItem(label=label, href=href, new_tab=item.new_tab)


def transform_nav_items(items: Iterable[RawNavigationItem]) -> List[NavigationItem]:
    """Normalize a menu, keeping the relative order of surviving entries."""
    return [nav_item for nav_item in map(transform_nav_item, items) if nav_item is not None]


def normalize_navigation(raw: Mapping[str, Any]) -> Navigation:
    """Build header and footer menus from the navigation global JSON."""
    navigation = RawNavigation.model_validate(raw or {})
    return Navigation(
        header=NavigationMenu(items=transform_nav_items(navigation.header.items)),
        footer=NavigationMenu(items=transform_nav_items(navigation.footer.items)),
    )


async def get_navigation(client: PayloadClient) -> Optional[Navigation]:
    """
    Fetch and normalize site navigation.

    Returns None when the fetch fails: a missing menu must not take down
    the page render, so callers render empty menus instead.
    """
    try:
        raw = await client.get_navigation_raw()
        return normalize_navigation(raw)
    except (PayloadError, ValueError) as e:
        # ValueError covers malformed JSON and schema validation errors
        logger.error(f"Failed to fetch navigation: {e}")
        return None
