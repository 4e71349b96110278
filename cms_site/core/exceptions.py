"""
Content API Exceptions

Every failure talking to the Payload REST API surfaces as a PayloadError.
Lookup misses are not errors: they come back as None or an empty list.
"""
from typing import Optional


class PayloadError(Exception):
    """Base error for the Payload content API."""

    def __init__(self, message: str, url: Optional[str] = None):
        self.message = message
        self.url = url
        super().__init__(self.message)


class PayloadAPIError(PayloadError):
    """Non-success HTTP status from the content API."""

    def __init__(self, status_code: int, status_text: str, url: Optional[str] = None):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Payload API error: {status_code} {status_text}", url=url)


class PayloadConnectionError(PayloadError):
    """Network failure or timeout before a response arrived."""

    def __init__(self, url: str, reason: str):
        self.reason = reason
        super().__init__(f"Payload API unreachable: {reason}", url=url)
