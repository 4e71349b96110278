"""Live-preview links from the CMS admin back to the site."""
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from cms_site.collections import get_collection
from cms_site.config import Settings


def build_live_preview_url(
    collection_slug: str,
    data: Optional[Mapping[str, Any]],
    settings: Settings,
    token: Optional[str] = None,
) -> str:
    """
    URL the admin's live-preview iframe loads for a document.

    pages -> <ASTRO_URL>/preview/<slug>
    posts -> <ASTRO_URL>/preview/blog/<slug>
    other -> <ASTRO_URL>
    """
    base_url = settings.ASTRO_URL
    try:
        collection = get_collection(collection_slug)
    except KeyError:
        return base_url

    if not collection.live_preview_path:
        return base_url

    slug = (data or {}).get("slug") or ""
    url = f"{base_url}{collection.live_preview_path.format(slug=slug)}"
    if token:
        url = f"{url}?{urlencode({'token': token})}"
    return url
