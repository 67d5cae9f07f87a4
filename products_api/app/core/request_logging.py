"""
Request logging middleware.

Every inbound call is logged with its method, path and a UTC
timestamp before it reaches the routers.  The middleware only
observes the request; the response is passed through untouched.
"""

import logging
from datetime import datetime, timezone
from typing import Awaitable, Callable

from fastapi import FastAPI, Request, Response


logger = logging.getLogger(__name__)


def format_request_line(method: str, path: str, when: datetime) -> str:
    """Return the log line for a request, e.g. ``[2025-01-01T10:00:00+00:00] GET /products``."""
    return f"[{when.isoformat()}] {method} {path}"


def register_request_logging(app: FastAPI) -> None:
    """Attach the request logging middleware to ``app``."""

    @app.middleware("http")
    async def log_requests(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        logger.info(
            format_request_line(
                request.method,
                request.url.path,
                datetime.now(timezone.utc),
            )
        )
        return await call_next(request)
