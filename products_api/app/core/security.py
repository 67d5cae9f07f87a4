"""
API key authentication.

Write operations require a single static secret configured through
``Settings.api_key``.  Clients present it in the ``x-api-key`` header
(the header name is configurable).  There are no users, sessions or
per-key scopes: a request is either carrying the configured key or it
is rejected with an ``AuthenticationError``.
"""

import hmac
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from .config import Settings
from .errors import AuthenticationError
from ..api.deps import get_settings


def authenticate(presented_key: Optional[str], expected_key: str) -> None:
    """Check ``presented_key`` against the configured secret.

    Raises
    ------
    AuthenticationError
        ``"API key is required"`` when no key (or an empty key) was
        presented, ``"Invalid API key"`` when it does not match.
    """
    if not presented_key:
        raise AuthenticationError("API key is required")
    # Constant-time comparison to prevent timing attacks
    if not hmac.compare_digest(presented_key.encode("utf-8"), expected_key.encode("utf-8")):
        raise AuthenticationError("Invalid API key")


async def require_api_key(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> None:
    """Dependency that enforces API key authentication on a route.

    The header is read through ``APIKeyHeader`` with ``auto_error``
    disabled so that a missing header produces our own error body
    instead of FastAPI's default 403.
    """
    header = APIKeyHeader(name=settings.api_key_header, auto_error=False)
    presented_key = await header(request)
    authenticate(presented_key, settings.api_key)
