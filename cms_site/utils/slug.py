"""Slug helpers shared by every collection with a URL."""
import re
from typing import Any, Callable, Mapping, Optional


_SPECIAL_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")  # ASCII word characters only
_WHITESPACE = re.compile(r"\s+")
_HYPHENS = re.compile(r"-+")
_EDGE_HYPHENS = re.compile(r"^-+|-+$")


def format_slug(value: str) -> str:
    """
    Convert a string to a URL-friendly slug.

        format_slug("Hello World!")      -> "hello-world"
        format_slug("  About   Us!! ")   -> "about-us"
    """
    slug = value.lower().strip()
    slug = _SPECIAL_CHARS.sub("", slug)
    slug = _WHITESPACE.sub("-", slug)
    slug = _HYPHENS.sub("-", slug)
    # Underscores count as word characters, so only hyphens are trimmed
    return _EDGE_HYPHENS.sub("", slug)


def slug_hook(field_to_use: str = "title") -> Callable[[Any, Mapping[str, Any], str], Any]:
    """
    Build a before-validate hook that derives the slug from another field.

    The slug is generated on create, or on update when it was left empty.
    An explicit slug is never overwritten on edit.
    """

    def generate(value: Any, data: Optional[Mapping[str, Any]], operation: str) -> Any:
        if operation == "create" or not value:
            source = (data or {}).get(field_to_use)
            if isinstance(source, str) and len(source) > 0:
                return format_slug(source)
        return value

    return generate
