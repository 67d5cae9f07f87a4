"""
Shared FastAPI dependencies.

The settings and the product store are owned by the application
object (``app.state``) rather than by module globals, so each app
built by ``create_app`` (including the ones built in tests) works on
its own instances.
"""

from fastapi import Request

from ..core.config import Settings
from ..services.product_service import ProductStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> ProductStore:
    return request.app.state.store
