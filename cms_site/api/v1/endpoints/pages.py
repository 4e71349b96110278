"""Published pages, rendered with their block data and site navigation."""
from typing import List

from fastapi import APIRouter, HTTPException, status

from cms_site.api.deps import Content
from cms_site.schemas.page import Page, RenderedPage
from cms_site.services.block_data_service import render_page

router = APIRouter()


@router.get("", response_model=List[Page])
async def list_pages(client: Content):
    """All published pages (used to enumerate static routes)."""
    return await client.get_pages()


@router.get("/{slug}", response_model=RenderedPage)
async def get_page(slug: str, client: Content):
    """A published page with every block's render-time data resolved."""
    page = await client.get_page_by_slug(slug)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Page '{slug}' not found")
    return await render_page(client, page)
