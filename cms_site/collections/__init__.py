# Collection and global definitions
from cms_site.collections.base import CollectionDefinition, GlobalDefinition, slug_field
from cms_site.collections.categories import CATEGORIES
from cms_site.collections.media import MEDIA
from cms_site.collections.navigation import NAVIGATION
from cms_site.collections.pages import PAGES
from cms_site.collections.posts import POSTS

ALL_COLLECTIONS = [MEDIA, PAGES, POSTS, CATEGORIES]
ALL_GLOBALS = [NAVIGATION]

_COLLECTIONS_BY_SLUG = {collection.slug: collection for collection in ALL_COLLECTIONS}


def get_collection(slug: str) -> CollectionDefinition:
    """Look up a collection definition. Raises KeyError if unknown."""
    return _COLLECTIONS_BY_SLUG[slug]


__all__ = [
    "ALL_COLLECTIONS",
    "ALL_GLOBALS",
    "CATEGORIES",
    "CollectionDefinition",
    "GlobalDefinition",
    "MEDIA",
    "NAVIGATION",
    "PAGES",
    "POSTS",
    "get_collection",
    "slug_field",
]
