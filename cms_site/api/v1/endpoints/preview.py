"""
Live-preview endpoints.

Draft-inclusive reads for the CMS admin's preview iframe. Every route here
requires a preview token scoped to the document; never mount them without it.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from cms_site.api.deps import Content, require_preview_token
from cms_site.schemas.cms import Post
from cms_site.schemas.page import RenderedPage
from cms_site.services.block_data_service import render_page

router = APIRouter()


@router.get(
    "/pages/{slug}",
    response_model=RenderedPage,
    dependencies=[Depends(require_preview_token("pages"))],
)
async def preview_page(slug: str, client: Content):
    page = await client.get_page_by_slug_preview(slug)
    if page is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Page '{slug}' not found")
    return await render_page(client, page)


@router.get(
    "/posts/{slug}",
    response_model=Post,
    dependencies=[Depends(require_preview_token("posts"))],
)
async def preview_post(slug: str, client: Content):
    post = await client.get_post_by_slug_preview(slug)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Post '{slug}' not found")
    return post
