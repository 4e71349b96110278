"""Shared fixtures: settings, a canned content API and clients wired to it."""
from typing import Any, Callable, Dict, List, Tuple, Union

import httpx
import pytest

from cms_site.config import Settings
from cms_site.services.payload_client import PayloadClient


PAYLOAD_URL = "http://cms.test"
ASTRO_URL = "http://site.test"


def paginated(docs: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap documents in the content API pagination envelope."""
    return {
        "docs": docs,
        "totalDocs": len(docs),
        "limit": 10,
        "totalPages": 1,
        "page": 1,
        "pagingCounter": 1,
        "hasPrevPage": False,
        "hasNextPage": False,
        "prevPage": None,
        "nextPage": None,
    }


Body = Union[str, Dict[str, Any], Callable[[httpx.Request], Dict[str, Any]]]


class FakePayload:
    """
    Stand-in for the Payload REST API behind an httpx.MockTransport.

    Routes map a request path to (status, body); body may be a callable of
    the request so filters can be honoured, or a raw string sent as text.
    Unrouted paths return no docs.
    Every request is recorded for assertions on query parameters.
    """

    def __init__(self):
        self.routes: Dict[str, Tuple[int, Body]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, path: str, body: Body, status_code: int = 200) -> None:
        self.routes[path] = (status_code, body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status_code, body = self.routes.get(request.url.path, (200, paginated([])))
        if callable(body):
            body = body(request)
        if isinstance(body, str):
            return httpx.Response(status_code, text=body)
        return httpx.Response(status_code, json=body)

    def params(self, index: int = -1) -> Dict[str, str]:
        return dict(self.requests[index].url.params)

    def paths(self) -> List[str]:
        return [request.url.path for request in self.requests]


# ==================== Sample documents ====================

NEWS = {"id": "c1", "name": "News", "slug": "news", "color": "#6366f1"}
GUIDES = {"id": "c2", "name": "Guides", "slug": "guides", "description": None}

FIRST_POST = {
    "id": "p1",
    "title": "First Post",
    "slug": "first-post",
    "description": "Hello",
    "category": NEWS,
    "author": None,
    "pubDate": "2024-03-01T00:00:00.000Z",
    "status": "published",
}
SECOND_POST = {
    "id": "p2",
    "title": "Second Post",
    "slug": "second-post",
    "description": "Again",
    "category": "c1",
    "pubDate": "2024-02-01T00:00:00.000Z",
    "status": "published",
}

HOME_PAGE = {
    "id": "pg1",
    "title": "Home",
    "slug": "home",
    "status": "published",
    "blocks": [
        {"blockType": "hero1", "id": "b1", "heading": "Welcome", "buttons": [{"label": "Go", "href": "/go"}]},
        {"blockType": "blog1", "id": "b2", "postSource": "latest", "limit": 2},
        {"blockType": "cta1", "id": "b3", "heading": "Join us", "background": None},
    ],
}

RAW_NAVIGATION = {
    "header": {
        "items": [
            {"type": "internal", "page": {"id": "pg1", "title": "Home", "slug": "home"}, "label": None},
            {"type": "internal", "page": "deleted-page-id", "label": "Gone"},
            {"type": "custom", "url": "https://example.com", "label": "Docs", "newTab": True},
            {"type": "custom", "url": None, "label": "Empty"},
            {"type": "internal", "page": {"id": "pg2", "title": "About Us", "slug": "about"}},
        ]
    },
    "footer": {"items": [{"type": "custom", "url": "/blog"}]},
}


def posts_by_category(request: httpx.Request) -> Dict[str, Any]:
    """Posts endpoint honouring the category filter."""
    category_id = request.url.params.get("where[category][equals]")
    posts = [FIRST_POST, SECOND_POST]
    if category_id is not None:
        posts = [
            post for post in posts
            if (post["category"]["id"] if isinstance(post["category"], dict) else post["category"]) == category_id
        ]
    return paginated(posts)


def categories_by_slug(request: httpx.Request) -> Dict[str, Any]:
    slug = request.url.params.get("where[slug][equals]")
    categories = [NEWS, GUIDES]
    if slug is not None:
        categories = [category for category in categories if category["slug"] == slug]
    return paginated(categories)


# ==================== Fixtures ====================

@pytest.fixture
def settings() -> Settings:
    return Settings(
        PAYLOAD_URL=f"{PAYLOAD_URL}/",
        ASTRO_URL=ASTRO_URL,
        PAYLOAD_SECRET="test-secret",
        CORS_ORIGINS=["http://localhost:3000"],
        _env_file=None,
    )


@pytest.fixture
def payload() -> FakePayload:
    return FakePayload()


@pytest.fixture
def content_site(payload: FakePayload) -> FakePayload:
    """A content API populated with the sample documents."""
    payload.add("/api/categories", categories_by_slug)
    payload.add("/api/posts", posts_by_category)
    payload.add("/api/globals/navigation", RAW_NAVIGATION)
    return payload


def make_client(settings: Settings, payload: FakePayload) -> PayloadClient:
    return PayloadClient(settings, http_client=httpx.AsyncClient(transport=httpx.MockTransport(payload)))


@pytest.fixture
async def client(settings: Settings, payload: FakePayload):
    payload_client = make_client(settings, payload)
    yield payload_client
    await payload_client.aclose()
