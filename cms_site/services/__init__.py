# Services module
from cms_site.services.payload_client import PayloadClient
from cms_site.services.navigation_service import get_navigation, normalize_navigation
from cms_site.services.block_data_service import render_block, render_page

__all__ = [
    "PayloadClient",
    # Navigation
    "get_navigation",
    "normalize_navigation",
    # Page rendering
    "render_block",
    "render_page",
]
