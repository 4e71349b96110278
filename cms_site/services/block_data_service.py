"""
Render-time data for page blocks.

Most blocks render from their own fields. A few pull content from other
collections; their resolvers are registered by block type and the page
renderer dispatches on `blockType`. Unregistered blocks pass through.
"""
import logging
from typing import Awaitable, Callable, Dict, List, Optional

from cms_site.schemas.blocks import Blog1Block, CategoryGrid1Block
from cms_site.schemas.cms import Category, CategoryWithPostCount, Post
from cms_site.schemas.navigation import Navigation
from cms_site.schemas.page import Page, RenderedBlock, RenderedPage
from cms_site.services.navigation_service import get_navigation
from cms_site.services.payload_client import PayloadClient

logger = logging.getLogger(__name__)

Resolver = Callable[[PayloadClient, object], Awaitable[RenderedBlock]]


async def resolve_blog_posts(client: PayloadClient, block: Blog1Block) -> List[Post]:
    """Posts for a blog grid according to its post source."""
    if block.post_source == "category":
        if isinstance(block.category, Category):
            return await client.get_posts_by_category_id(block.category.id, limit=block.limit)
        if block.category:
            return await client.get_posts_by_category_id(block.category, limit=block.limit)
        return []

    if block.post_source == "specific":
        # Unresolved references (bare ids) cannot be rendered
        selected = [post for post in block.posts if isinstance(post, Post)]
        return selected[:block.limit] if block.limit else selected

    return await client.get_posts(limit=block.limit)


async def resolve_grid_categories(client: PayloadClient, block: CategoryGrid1Block) -> List[CategoryWithPostCount]:
    """Categories for a category grid, annotated with post counts."""
    counted = await client.get_categories_with_post_counts()
    if block.category_source != "specific":
        return counted

    counts = {category.id: category.post_count for category in counted}
    return [
        CategoryWithPostCount(**category.model_dump(), post_count=counts.get(category.id, 0))
        for category in block.categories
        if isinstance(category, Category)
    ]


async def _render_blog1(client: PayloadClient, block: Blog1Block) -> RenderedBlock:
    return RenderedBlock(block=block, posts=await resolve_blog_posts(client, block))


async def _render_category_grid1(client: PayloadClient, block: CategoryGrid1Block) -> RenderedBlock:
    return RenderedBlock(block=block, categories=await resolve_grid_categories(client, block))


BLOCK_RESOLVERS: Dict[str, Resolver] = {
    "blog1": _render_blog1,
    "categoryGrid1": _render_category_grid1,
}


async def render_block(client: PayloadClient, block) -> RenderedBlock:
    resolver = BLOCK_RESOLVERS.get(block.block_type)
    if resolver is None:
        return RenderedBlock(block=block)
    return await resolver(client, block)


async def render_page(
    client: PayloadClient,
    page: Page,
    navigation: Optional[Navigation] = None,
) -> RenderedPage:
    """
    Resolve every block of a page, in order, plus site navigation.

    Content API errors from block resolvers propagate and fail the render.
    A failed navigation fetch renders with empty menus.
    """
    if navigation is None:
        navigation = await get_navigation(client) or Navigation()

    blocks = []
    for block in page.blocks:
        blocks.append(await render_block(client, block))

    logger.debug(f"Rendered page '{page.slug}' with {len(blocks)} block(s)")
    return RenderedPage(page=page, blocks=blocks, navigation=navigation)
