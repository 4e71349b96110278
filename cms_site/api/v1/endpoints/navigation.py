from fastapi import APIRouter

from cms_site.api.deps import Content
from cms_site.schemas.navigation import Navigation
from cms_site.services.navigation_service import get_navigation

router = APIRouter()


@router.get("", response_model=Navigation)
async def read_navigation(client: Content):
    """Header and footer menus. Empty menus when the CMS could not be reached."""
    return await get_navigation(client) or Navigation()
