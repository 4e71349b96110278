import pytest
from fastapi.testclient import TestClient

from conftest import HOME_PAGE, FIRST_POST, make_client, paginated
from cms_site.core.security import create_preview_token
from cms_site.main import create_app


@pytest.fixture
def api(settings, content_site):
    """Test client for an app wired to the canned content API."""
    app = create_app(settings=settings, payload_client=make_client(settings, content_site))
    with TestClient(app) as test_client:
        yield test_client


def test_health(api):
    """Test health endpoint"""
    response = api.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["content_api"] == "connected"


def test_health_unhealthy(api, content_site):
    content_site.add("/api/categories", {}, status_code=500)
    response = api.get("/health")
    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_root(api):
    assert api.get("/").json()["docs"] == "/docs"


def test_get_page_renders_blocks(api, content_site):
    content_site.add("/api/pages", paginated([HOME_PAGE]))

    response = api.get("/api/v1/pages/home")

    assert response.status_code == 200
    body = response.json()
    assert body["page"]["slug"] == "home"
    assert [block["block"]["blockType"] for block in body["blocks"]] == ["hero1", "blog1", "cta1"]
    assert [post["slug"] for post in body["blocks"][1]["posts"]] == ["first-post", "second-post"]
    assert body["navigation"]["header"]["items"][0] == {"label": "Home", "href": "/", "newTab": False}


def test_list_pages(api, content_site):
    content_site.add("/api/pages", paginated([HOME_PAGE]))
    response = api.get("/api/v1/pages")
    assert response.status_code == 200
    assert [page["slug"] for page in response.json()] == ["home"]


def test_missing_page_is_404(api):
    response = api.get("/api/v1/pages/missing")
    assert response.status_code == 404
    assert response.json()["detail"] == "Page 'missing' not found"


def test_content_api_failure_is_502(api, content_site):
    content_site.add("/api/pages", {"errors": []}, status_code=500)

    response = api.get("/api/v1/pages/home")

    assert response.status_code == 502
    body = response.json()
    assert body["type"] == "PayloadAPIError"
    assert body["status_code"] == 500
    assert body["error"] == "Payload API error: 500 Internal Server Error"


def test_posts(api, content_site):
    response = api.get("/api/v1/posts", params={"limit": 2})
    assert response.status_code == 200
    assert [post["slug"] for post in response.json()] == ["first-post", "second-post"]
    assert content_site.params()["limit"] == "2"

    assert api.get("/api/v1/posts", params={"limit": 0}).status_code == 422


def test_post_by_slug(api, content_site):
    content_site.add("/api/posts", paginated([FIRST_POST]))
    response = api.get("/api/v1/posts/first-post")
    assert response.status_code == 200
    assert response.json()["category"]["slug"] == "news"


def test_categories(api):
    response = api.get("/api/v1/categories")
    assert response.status_code == 200
    assert [(c["slug"], c["postCount"]) for c in response.json()] == [("news", 2), ("guides", 0)]


def test_category_posts(api):
    assert len(api.get("/api/v1/categories/news/posts").json()) == 2
    assert api.get("/api/v1/categories/nope/posts").status_code == 404
    assert api.get("/api/v1/categories/nope").status_code == 404


def test_navigation(api):
    response = api.get("/api/v1/navigation")
    assert response.status_code == 200
    assert [item["href"] for item in response.json()["header"]["items"]] == ["/", "https://example.com", "/about"]


def test_navigation_failure_returns_empty_menus(api, content_site):
    content_site.add("/api/globals/navigation", {}, status_code=500)
    response = api.get("/api/v1/navigation")
    assert response.status_code == 200
    assert response.json() == {"header": {"items": []}, "footer": {"items": []}}


def test_preview_requires_token(api):
    response = api.get("/api/v1/preview/pages/home")
    assert response.status_code == 401
    assert response.json()["detail"] == "Preview token required"


def test_preview_rejects_token_for_other_document(api, settings):
    token = create_preview_token(settings, "pages", "about")
    response = api.get("/api/v1/preview/pages/home", params={"token": token})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid or expired preview token"


def test_preview_page_with_token(api, settings, content_site):
    content_site.add("/api/pages", paginated([{**HOME_PAGE, "status": "draft"}]))
    token = create_preview_token(settings, "pages", "home")

    response = api.get("/api/v1/preview/pages/home", params={"token": token})

    assert response.status_code == 200
    assert response.json()["page"]["status"] == "draft"
    page_request = next(request for request in content_site.requests if request.url.path == "/api/pages")
    assert page_request.url.params["draft"] == "true"


def test_preview_post_with_bearer_token(api, settings, content_site):
    content_site.add("/api/posts", paginated([FIRST_POST]))
    token = create_preview_token(settings, "posts", "first-post")

    response = api.get("/api/v1/preview/posts/first-post", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["slug"] == "first-post"


def test_schema_blocks(api):
    response = api.get("/api/v1/schema/blocks")
    assert response.status_code == 200
    blocks = response.json()
    assert len(blocks) == 11
    cta1 = next(block for block in blocks if block["slug"] == "cta1")
    background = next(field for field in cta1["fields"] if field["name"] == "background")
    assert background["default_value"] == "primary"


def test_schema_block_lookup(api):
    assert api.get("/api/v1/schema/blocks/faq1").json()["slug"] == "faq1"
    assert api.get("/api/v1/schema/blocks/carousel").status_code == 404


def test_schema_collections(api):
    body = api.get("/api/v1/schema/collections").json()
    assert [collection["slug"] for collection in body["collections"]] == ["media", "pages", "posts", "categories"]
    assert [global_["slug"] for global_ in body["globals"]] == ["navigation"]


def test_preview_draft_with_incomplete_block(api, settings, content_site):
    draft = {"id": "pg9", "title": "Draft", "slug": "draft", "status": "draft",
             "blocks": [{"blockType": "hero1", "id": "b1", "heading": None}]}
    content_site.add("/api/pages", paginated([draft]))
    token = create_preview_token(settings, "pages", "draft")

    response = api.get("/api/v1/preview/pages/draft", params={"token": token})

    assert response.status_code == 200
    block = response.json()["blocks"][0]["block"]
    assert block["blockType"] == "hero1"
    assert block["heading"] is None


def test_invalid_json_from_content_api_is_502(api, content_site):
    content_site.add("/api/posts", "<html>Bad Gateway</html>")

    response = api.get("/api/v1/posts")

    assert response.status_code == 502
    assert response.json()["type"] == "PayloadError"
