from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from cms_site.api.deps import Content
from cms_site.schemas.cms import Post

router = APIRouter()


@router.get("", response_model=List[Post])
async def list_posts(
    client: Content,
    limit: Optional[int] = Query(None, ge=1, le=100, description="Maximum number of posts"),
):
    """Published posts, newest first."""
    return await client.get_posts(limit=limit)


@router.get("/{slug}", response_model=Post)
async def get_post(slug: str, client: Content):
    post = await client.get_post_by_slug(slug)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Post '{slug}' not found")
    return post
