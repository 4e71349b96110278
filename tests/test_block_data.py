from conftest import FIRST_POST, GUIDES, HOME_PAGE, NEWS, paginated
from cms_site.schemas.blocks import Blog1Block, CategoryGrid1Block, Hero1Block
from cms_site.schemas.navigation import Navigation
from cms_site.schemas.page import Page
from cms_site.services.block_data_service import (
    render_block,
    render_page,
    resolve_blog_posts,
    resolve_grid_categories,
)


async def test_latest_posts(client, content_site):
    block = Blog1Block(block_type="blog1", limit=1)

    posts = await resolve_blog_posts(client, block)

    assert len(posts) == 2  # the canned API ignores limit
    assert content_site.params()["limit"] == "1"
    assert content_site.params()["sort"] == "-pubDate"


async def test_category_posts_with_embedded_category(client, content_site):
    block = Blog1Block.model_validate({"blockType": "blog1", "postSource": "category", "category": NEWS})

    posts = await resolve_blog_posts(client, block)

    assert [post.id for post in posts] == ["p1", "p2"]
    assert content_site.params()["where[category][equals]"] == "c1"
    assert content_site.params()["limit"] == "6"


async def test_category_posts_with_bare_id(client, content_site):
    block = Blog1Block.model_validate({"blockType": "blog1", "postSource": "category", "category": "c2"})
    assert await resolve_blog_posts(client, block) == []
    assert content_site.params()["where[category][equals]"] == "c2"


async def test_category_source_without_category(client, content_site):
    block = Blog1Block(block_type="blog1", post_source="category")
    assert await resolve_blog_posts(client, block) == []
    assert content_site.requests == []


async def test_specific_posts_use_embedded_documents(client, content_site):
    block = Blog1Block.model_validate(
        {"blockType": "blog1", "postSource": "specific", "posts": [FIRST_POST, "unresolved-id"], "limit": 6}
    )

    posts = await resolve_blog_posts(client, block)

    assert [post.id for post in posts] == ["p1"]
    assert content_site.requests == []


async def test_grid_all_categories(client, content_site):
    block = CategoryGrid1Block(block_type="categoryGrid1")
    categories = await resolve_grid_categories(client, block)
    assert [(category.slug, category.post_count) for category in categories] == [("news", 2), ("guides", 0)]


async def test_grid_specific_categories(client, content_site):
    block = CategoryGrid1Block.model_validate(
        {"blockType": "categoryGrid1", "categorySource": "specific", "categories": [GUIDES, NEWS]}
    )
    categories = await resolve_grid_categories(client, block)
    assert [(category.slug, category.post_count) for category in categories] == [("guides", 0), ("news", 2)]


async def test_plain_blocks_pass_through(client, content_site):
    block = Hero1Block(block_type="hero1", heading="Hi")
    rendered = await render_block(client, block)
    assert rendered.block == block
    assert rendered.posts is None
    assert content_site.requests == []


async def test_render_page_resolves_blocks_in_order(client, content_site):
    page = Page.model_validate(HOME_PAGE)

    rendered = await render_page(client, page)

    assert [item.block.block_type for item in rendered.blocks] == ["hero1", "blog1", "cta1"]
    assert [post.id for post in rendered.blocks[1].posts] == ["p1", "p2"]
    assert rendered.blocks[2].posts is None
    assert len(rendered.navigation.header.items) == 3


async def test_render_page_survives_navigation_failure(client, payload):
    payload.add("/api/posts", paginated([]))
    payload.add("/api/globals/navigation", {}, status_code=502)

    rendered = await render_page(client, Page.model_validate(HOME_PAGE))

    assert rendered.navigation == Navigation()
    assert rendered.blocks[1].posts == []


async def test_render_page_uses_given_navigation(client, content_site):
    navigation = Navigation()
    rendered = await render_page(client, Page.model_validate(HOME_PAGE), navigation=navigation)
    assert rendered.navigation == navigation
    assert "/api/globals/navigation" not in content_site.paths()
