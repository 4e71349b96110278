from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from cms_site.api.deps import Content
from cms_site.schemas.cms import Category, CategoryWithPostCount, Post

router = APIRouter()


@router.get("", response_model=List[CategoryWithPostCount])
async def list_categories(client: Content):
    """Every category with its published post count."""
    return await client.get_categories_with_post_counts()


@router.get("/{slug}", response_model=Category)
async def get_category(slug: str, client: Content):
    category = await client.get_category_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Category '{slug}' not found")
    return category


@router.get("/{slug}/posts", response_model=List[Post])
async def list_category_posts(
    slug: str,
    client: Content,
    limit: Optional[int] = Query(None, ge=1, le=100),
):
    """Published posts of a category, newest first. 404 for an unknown category."""
    category = await client.get_category_by_slug(slug)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Category '{slug}' not found")
    return await client.get_posts_by_category_id(category.id, limit=limit)
