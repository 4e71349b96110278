"""
Payload CMS Content Client.

Wraps the Payload REST API for the site:
- Pages (published, and draft-inclusive for live preview)
- Posts (newest first, by slug, by category)
- Categories (with client-side post counts)
- Navigation global
- Media URL resolution

Every read is one GET that unwraps the pagination envelope. No retries, no
caching: a non-success status raises PayloadAPIError, a lookup miss returns
None or [].

API Docs: https://payloadcms.com/docs/rest-api/overview
"""
import logging
from typing import Any, Dict, List, Optional

import httpx

from cms_site.config import Settings
from cms_site.core.exceptions import PayloadAPIError, PayloadConnectionError, PayloadError
from cms_site.schemas.base import PaginatedDocs
from cms_site.schemas.cms import Category, CategoryWithPostCount, Media, Post
from cms_site.schemas.page import Page

logger = logging.getLogger(__name__)

PUBLISHED = "published"
NEWEST_FIRST = "-pubDate"


def where_equals(field: str, value: Any) -> Dict[str, str]:
    """Build a `where[<field>][equals]=<value>` query parameter."""
    return {f"where[{field}][equals]": str(value)}


class PayloadClient:
    """
    Async client for the Payload content API.

    Usage:
        async with PayloadClient(settings) as client:
            page = await client.get_page_by_slug("about")
            posts = await client.get_posts(limit=3)
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.AsyncClient] = None):
        self.settings = settings
        self.base_url = settings.PAYLOAD_URL
        self._client = http_client or httpx.AsyncClient(timeout=settings.PAYLOAD_TIMEOUT)

    async def __aenter__(self) -> "PayloadClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _fetch(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET `<PAYLOAD_URL>/api<endpoint>` and return the decoded JSON body."""
        url = f"{self.settings.api_url}/{endpoint.lstrip('/')}"
        logger.debug(f"Payload GET {url} params={params}")

        try:
            response = await self._client.get(
                url,
                params=params,
                headers={"Content-Type": "application/json"},
            )
        except httpx.RequestError as e:
            logger.error(f"Payload request failed: {url} - {e!r}")
            raise PayloadConnectionError(url=url, reason=str(e) or type(e).__name__) from e

        if not response.is_success:
            logger.error(f"Payload API error: {response.status_code} {response.reason_phrase} - {url}")
            raise PayloadAPIError(
                status_code=response.status_code,
                status_text=response.reason_phrase,
                url=str(response.url),
            )

        try:
            return response.json()
        except ValueError as e:
            # Proxy error pages, truncated bodies
            logger.error(f"Payload API returned invalid JSON: {response.status_code} - {url}")
            raise PayloadError(f"Payload API returned invalid JSON: {e}", url=str(response.url)) from e

    async def _find(self, collection: str, params: Dict[str, Any], model: type) -> PaginatedDocs:
        data = await self._fetch(f"/{collection}", params=params)
        return PaginatedDocs[model].model_validate(data)

    def _published(self, depth: int, limit: Optional[int] = None, **extra: Any) -> Dict[str, Any]:
        params = {**where_equals("status", PUBLISHED), "depth": depth}
        if limit:
            params["limit"] = limit
        params.update(extra)
        return params

    # ==================== PAGES ====================

    async def get_pages(self) -> List[Page]:
        """All published pages."""
        params = self._published(depth=self.settings.PAGE_DEPTH)
        return (await self._find("pages", params, Page)).docs

    async def get_page_by_slug(self, slug: str) -> Optional[Page]:
        """A published page, or None."""
        params = {**where_equals("slug", slug), **self._published(depth=self.settings.PAGE_DEPTH)}
        return (await self._find("pages", params, Page)).first()

    async def get_page_by_slug_preview(self, slug: str) -> Optional[Page]:
        """A page including drafts. Live preview only."""
        params = {**where_equals("slug", slug), "draft": "true", "depth": self.settings.PAGE_DEPTH}
        return (await self._find("pages", params, Page)).first()

    # ==================== POSTS ====================

    async def get_posts(self, limit: Optional[int] = None) -> List[Post]:
        """Published posts, newest first."""
        params = self._published(depth=self.settings.POST_DEPTH, limit=limit, sort=NEWEST_FIRST)
        return (await self._find("posts", params, Post)).docs

    async def get_post_by_slug(self, slug: str) -> Optional[Post]:
        params = {**where_equals("slug", slug), **self._published(depth=self.settings.POST_DEPTH)}
        return (await self._find("posts", params, Post)).first()

    async def get_post_by_slug_preview(self, slug: str) -> Optional[Post]:
        """A post including drafts. Live preview only."""
        params = {**where_equals("slug", slug), "draft": "true", "depth": self.settings.POST_DEPTH}
        return (await self._find("posts", params, Post)).first()

    async def get_posts_by_category_id(self, category_id: str, limit: Optional[int] = None) -> List[Post]:
        params = {
            **where_equals("category", category_id),
            **self._published(depth=self.settings.POST_DEPTH, limit=limit, sort=NEWEST_FIRST),
        }
        return (await self._find("posts", params, Post)).docs

    async def get_posts_by_category(self, category_slug: str, limit: Optional[int] = None) -> List[Post]:
        """
        Published posts of a category, newest first.

        Two requests: resolve the slug to an id, then filter posts by it.
        An unknown category slug yields [] rather than an error.
        """
        category = await self.get_category_by_slug(category_slug)
        if category is None:
            return []
        return await self.get_posts_by_category_id(category.id, limit=limit)

    # ==================== CATEGORIES ====================

    async def get_categories(self) -> List[Category]:
        # limit=0 disables pagination: every category, not the first page
        return (await self._find("categories", {"limit": 0}, Category)).docs

    async def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return (await self._find("categories", where_equals("slug", slug), Category)).first()

    async def get_categories_with_post_counts(self) -> List[CategoryWithPostCount]:
        """
        Every category with the number of published posts referencing it.

        Fetches all categories, then all published posts (limit=0, no
        pagination), and counts client-side. A post's category may be an
        embedded object or a bare id.
        """
        categories = await self.get_categories()
        params = {**where_equals("status", PUBLISHED), "limit": 0}
        posts = (await self._find("posts", params, Post)).docs

        return [
            CategoryWithPostCount(
                **category.model_dump(),
                post_count=sum(1 for post in posts if post.category_id == category.id),
            )
            for category in categories
        ]

    # ==================== GLOBALS ====================

    async def get_navigation_raw(self) -> Dict[str, Any]:
        """The navigation global as stored, linked pages resolved one level deep."""
        return await self._fetch("/globals/navigation", params={"depth": self.settings.NAVIGATION_DEPTH})

    # ==================== MEDIA ====================

    def get_media_url(self, media: Optional[Media]) -> Optional[str]:
        """Absolute URL for a media item; relative URLs are served by the CMS."""
        if media is None or not media.url:
            return None
        if media.url.startswith("http"):
            return media.url
        return f"{self.base_url}{media.url}"

    # ==================== HEALTH ====================

    async def check_health(self) -> bool:
        """True when the content API answers a minimal query."""
        try:
            await self._fetch("/categories", params={"limit": 1, "depth": 0})
        except PayloadError:
            return False
        return True
