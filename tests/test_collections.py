import pytest

from cms_site.collections import ALL_COLLECTIONS, CATEGORIES, NAVIGATION, PAGES, POSTS, get_collection
from cms_site.collections.preview import build_live_preview_url


def test_registry():
    assert [collection.slug for collection in ALL_COLLECTIONS] == ["media", "pages", "posts", "categories"]
    assert get_collection("posts") is POSTS
    with pytest.raises(KeyError):
        get_collection("users")


def test_prepare_generates_slug_and_defaults_on_create():
    data = POSTS.prepare({"title": "Hello World!"}, "create")
    assert data["slug"] == "hello-world"
    assert data["status"] == "draft"
    assert data["author"] == "Admin"


def test_prepare_keeps_slug_on_update():
    original = {"title": "Hello World", "slug": "hello-world", "status": "published"}
    data = POSTS.prepare({"title": "Goodbye World"}, "update", original=original)
    assert data["slug"] == "hello-world"
    assert data["title"] == "Goodbye World"
    assert data["status"] == "published"


def test_prepare_regenerates_cleared_slug_on_update():
    original = {"title": "Hello World", "slug": "hello-world"}
    data = POSTS.prepare({"title": "Goodbye World", "slug": ""}, "update", original=original)
    assert data["slug"] == "goodbye-world"


def test_prepare_category_slug_uses_name():
    data = CATEGORIES.prepare({"name": "Product News"}, "create")
    assert data["slug"] == "product-news"


def test_prepare_rejects_unknown_operation():
    with pytest.raises(ValueError):
        PAGES.prepare({"title": "x"}, "delete")


def test_page_requires_blocks():
    errors = PAGES.validate_document({"title": "About", "slug": "about", "status": "draft", "blocks": []})
    assert errors == {"blocks": "This field is required"}


def test_page_blocks_are_validated_per_type():
    document = {
        "title": "About",
        "status": "published",
        "blocks": [
            {"blockType": "hero1", "heading": "About us"},
            {"blockType": "cta1"},
            {"blockType": "carousel"},
        ],
    }
    errors = PAGES.validate_document(document)
    assert errors == {
        "blocks.1.heading": "This field is required",
        "blocks.2.blockType": "Unknown block type: 'carousel'",
    }


def test_post_validation():
    errors = POSTS.validate_document({"title": "Post", "status": "published"})
    assert set(errors) == {"description", "category", "pubDate", "content"}


def test_navigation_link_validation():
    document = {
        "header": {
            "items": [
                {"type": "internal", "page": "pg1"},
                {"type": "internal"},
                {"type": "custom", "url": ""},
                {"type": "custom", "url": "/blog"},
            ]
        },
        "footer": {"items": []},
    }
    errors = NAVIGATION.validate_document(document)
    assert errors == {
        "header.items.1.page": "Please select a page",
        "header.items.2.url": "Please enter a URL",
    }


def test_live_preview_urls(settings):
    assert build_live_preview_url("pages", {"slug": "about"}, settings) == "http://site.test/preview/about"
    assert build_live_preview_url("posts", {"slug": "first"}, settings) == "http://site.test/preview/blog/first"
    assert build_live_preview_url("categories", {"slug": "news"}, settings) == "http://site.test"
    assert build_live_preview_url("unknown", {"slug": "x"}, settings) == "http://site.test"


def test_live_preview_url_without_slug(settings):
    assert build_live_preview_url("pages", None, settings) == "http://site.test/preview/"


def test_live_preview_url_with_token(settings):
    url = build_live_preview_url("posts", {"slug": "first"}, settings, token="abc.def")
    assert url == "http://site.test/preview/blog/first?token=abc.def"
