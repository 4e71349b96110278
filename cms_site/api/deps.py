from typing import Annotated, Optional
import logging

from fastapi import Depends, HTTPException, Query, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cms_site.config import Settings
from cms_site.core.security import verify_preview_token
from cms_site.services.payload_client import PayloadClient


logger = logging.getLogger(__name__)

# Bearer is optional: preview links carry the token as ?token=
security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_payload_client(request: Request) -> PayloadClient:
    """The shared content API client opened in the app lifespan."""
    return request.app.state.payload_client


AppSettings = Annotated[Settings, Depends(get_app_settings)]
Content = Annotated[PayloadClient, Depends(get_payload_client)]


def require_preview_token(collection: str):
    """
    Dependency factory guarding draft-inclusive routes.

    Usage:
        @router.get("/pages/{slug}", dependencies=[Depends(require_preview_token("pages"))])
        async def preview_page(slug: str): ...
    """

    async def preview_dependency(
        slug: str,
        settings: AppSettings,
        credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
        token: Optional[str] = Query(None, description="Preview token from the live-preview URL"),
    ) -> None:
        preview_token = token or (credentials.credentials if credentials else None)
        if not preview_token:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Preview token required",
                headers={"WWW-Authenticate": "Bearer"},
            )

        if not verify_preview_token(settings, preview_token, collection, slug):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Invalid or expired preview token",
                headers={"WWW-Authenticate": "Bearer"},
            )

    return preview_dependency
