"""
Error taxonomy and the centralised error responder.

Handlers and services signal failure by raising one of the exceptions
defined here.  ``register_exception_handlers`` installs the single
terminal stage that turns any failure (typed, framework or
unclassified) into a JSON body of the shape::

    {"error": "<message>", "details": ["..."], "stack": "..."}

``details`` is only present when the error carries any, and ``stack``
is only present when the application runs in the development
environment.  Unmatched routes get a dedicated 404 body naming the
requested path.
"""

from __future__ import annotations

import logging
import traceback
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class ProductsAPIError(Exception):
    """Base error carrying a message, an HTTP status code and optional details.

    Raised directly for failures that have no dedicated subclass, e.g.
    a search request without a query string.
    """

    default_message = INTERNAL_ERROR_MESSAGE
    default_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[List[str]] = None,
    ) -> None:
        self.message = message or self.default_message
        self.status_code = status_code or self.default_status_code
        self.details = list(details) if details else None
        super().__init__(self.message)


class NotFoundError(ProductsAPIError):
    default_message = "Resource not found"
    default_status_code = status.HTTP_404_NOT_FOUND


class ValidationError(ProductsAPIError):
    """Request payload failed validation; ``details`` lists every violation."""

    default_message = "Validation failed"
    default_status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: Optional[str] = None, details: Optional[List[str]] = None) -> None:
        super().__init__(message)
        # An empty list is still reported so clients can rely on the key.
        self.details = list(details or [])


class AuthenticationError(ProductsAPIError):
    default_message = "Authentication failed"
    default_status_code = status.HTTP_401_UNAUTHORIZED


def build_error_body(
    message: str,
    details: Optional[List[str]] = None,
    exc: Optional[BaseException] = None,
    debug: bool = False,
) -> Dict[str, Any]:
    """Build the uniform error body.

    Parameters
    ----------
    message : str
        Human readable error message placed under ``error``.
    details : Optional[list]
        Violation descriptions; omitted from the body when ``None``.
    exc : Optional[BaseException]
        The failure being reported.  Its traceback becomes ``stack``
        when ``debug`` is true.
    debug : bool
        Whether diagnostic stack traces may be exposed.
    """
    body: Dict[str, Any] = {"error": message or INTERNAL_ERROR_MESSAGE}
    if details is not None:
        body["details"] = details
    if debug and exc is not None:
        body["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return body


def _is_debug(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings is not None and settings.debug)


def _format_validation_error(error: Dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path"))
    message = error.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


async def products_api_error_handler(request: Request, exc: ProductsAPIError) -> JSONResponse:
    logger.warning(
        "%s %s failed with %s: %s",
        request.method,
        request.url.path,
        exc.status_code,
        exc.message,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(exc.message, exc.details, exc, _is_debug(request)),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = [_format_validation_error(error) for error in exc.errors()]
    logger.warning("%s %s rejected: %s", request.method, request.url.path, details)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error_body(ValidationError.default_message, details, exc, _is_debug(request)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        # The routers never raise framework 404s themselves (they raise
        # ``NotFoundError``), so this is an unmatched route.
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": "Route not found",
                "message": f"The route {request.url.path} does not exist",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=build_error_body(str(exc.detail), None, exc, _is_debug(request)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error while processing %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_body(str(exc) or INTERNAL_ERROR_MESSAGE, None, exc, _is_debug(request)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error responder on ``app``."""
    app.add_exception_handler(ProductsAPIError, products_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
