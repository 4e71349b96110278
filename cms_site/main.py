from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional
import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from cms_site.config import Settings, get_settings
from cms_site.api.v1.router import api_router
from cms_site.core.exceptions import PayloadAPIError, PayloadError
from cms_site.services.payload_client import PayloadClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup:
    - Open the shared content API client (unless one was injected)

    Shutdown:
    - Close it
    """
    settings: Settings = app.state.settings
    owns_client = app.state.payload_client is None
    if owns_client:
        app.state.payload_client = PayloadClient(settings)
    logger.info(f"Content API: {settings.api_url}")

    yield

    if owns_client:
        await app.state.payload_client.aclose()
        app.state.payload_client = None


API_DESCRIPTION = """
## Site Content API

Published pages, posts, categories and navigation from Payload CMS,
shaped for the static site's block renderer.

| Area | Description |
|------|-------------|
| **Pages** | Page-builder pages with render-time block data |
| **Posts** | Blog posts, newest first |
| **Categories** | Categories with published post counts |
| **Navigation** | Normalized header/footer menus |
| **Preview** | Draft-inclusive reads, preview token required |
| **Schema** | Block catalog and collection definitions |

### Error Codes

| Code | Description |
|------|-------------|
| 401 | Missing/invalid preview token |
| 404 | Page, post or category doesn't exist |
| 502 | Content API failed or unreachable |
| 500 | Internal Server Error |
"""


def _error_response(request: Request, status_code: int, content: dict, settings: Settings) -> JSONResponse:
    response = JSONResponse(status_code=status_code, content=content)

    # Error responses bypass CORSMiddleware, add headers for allowed origins
    origin = request.headers.get("origin", "")
    if origin in settings.CORS_ORIGINS or "*" in settings.CORS_ORIGINS:
        response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
    return response


def create_app(
    settings: Optional[Settings] = None,
    payload_client: Optional[PayloadClient] = None,
) -> FastAPI:
    """Build the application. Settings are resolved once here and passed down."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description=API_DESCRIPTION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.payload_client = payload_client

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    @app.exception_handler(PayloadError)
    async def payload_exception_handler(request: Request, exc: PayloadError):
        """Upstream content API failures fail the request with 502."""
        error_detail = {
            "error": exc.message,
            "type": type(exc).__name__,
            "path": str(request.url.path),
            "method": request.method,
        }
        if isinstance(exc, PayloadAPIError):
            error_detail["status_code"] = exc.status_code
        return _error_response(request, 502, error_detail, settings)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Return error information; the traceback only in debug mode."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")

        error_detail = {
            "error": str(exc),
            "type": type(exc).__name__,
            "path": str(request.url.path),
            "method": request.method,
        }
        if settings.DEBUG:
            error_detail["traceback"] = traceback.format_exc()
        return _error_response(request, 500, error_detail, settings)

    @app.get("/health", tags=["Health"])
    async def health_check(request: Request):
        """Health check endpoint with content API validation."""
        client: PayloadClient = request.app.state.payload_client
        reachable = await client.check_health()

        health_status = {
            "status": "healthy" if reachable else "unhealthy",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "checks": {
                "content_api": "connected" if reachable else "unreachable",
            },
        }

        # Return 503 if unhealthy
        if not reachable:
            return JSONResponse(status_code=503, content=health_status)

        return health_status

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.APP_NAME}",
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "redoc": "/redoc",
        }

    return app


app = create_app()
