from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

from jose import JWTError, jwt

from cms_site.config import Settings

logger = logging.getLogger(__name__)

PREVIEW_TOKEN_TYPE = "preview"


def preview_subject(collection: str, slug: str) -> str:
    """Token subject: one collection document, e.g. "pages:about"."""
    return f"{collection}:{slug}"


def create_preview_token(
    settings: Settings,
    collection: str,
    slug: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a JWT granting draft access to a single document.

    Args:
        settings: Application settings (signing secret and algorithm)
        collection: Collection slug, "pages" or "posts"
        slug: Document slug
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.PREVIEW_TOKEN_EXPIRE_MINUTES)

    to_encode = {
        "sub": preview_subject(collection, slug),
        "exp": expire,
        "iat": datetime.now(timezone.utc),
        "type": PREVIEW_TOKEN_TYPE,
    }

    return jwt.encode(
        to_encode,
        settings.PAYLOAD_SECRET,
        algorithm=settings.PREVIEW_TOKEN_ALGORITHM,
    )


def verify_preview_token(settings: Settings, token: str, collection: str, slug: str) -> bool:
    """
    Verify a preview token for one document.

    Returns:
        True if the token is valid, unexpired, of preview type and scoped
        to this collection and slug; False otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.PAYLOAD_SECRET,
            algorithms=[settings.PREVIEW_TOKEN_ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"Preview token rejected: {e}")
        return False

    if payload.get("type") != PREVIEW_TOKEN_TYPE:
        logger.warning("Preview token rejected: wrong token type")
        return False

    if payload.get("sub") != preview_subject(collection, slug):
        logger.warning(f"Preview token rejected: scoped to {payload.get('sub')}")
        return False

    return True
