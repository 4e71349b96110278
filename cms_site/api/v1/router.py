from fastapi import APIRouter

from cms_site.api.v1.endpoints import (
    # Published content
    pages,
    posts,
    categories,
    navigation,
    # Live preview (token protected)
    preview,
    # Schema introspection
    schema,
)


# Create main API router
api_router = APIRouter(prefix="/api/v1")

# ==================== Content ====================
api_router.include_router(
    pages.router,
    prefix="/pages",
    tags=["Pages"]
)

api_router.include_router(
    posts.router,
    prefix="/posts",
    tags=["Posts"]
)

api_router.include_router(
    categories.router,
    prefix="/categories",
    tags=["Categories"]
)

api_router.include_router(
    navigation.router,
    prefix="/navigation",
    tags=["Navigation"]
)

# ==================== Live Preview ====================
api_router.include_router(
    preview.router,
    prefix="/preview",
    tags=["Preview"]
)

# ==================== Schema ====================
api_router.include_router(
    schema.router,
    prefix="/schema",
    tags=["Schema"]
)
