"""
Main entrypoint for the Products API.

This module assembles the FastAPI application: it sets up logging,
request logging, the error responder and the product routes.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn products_api.app.main:app --reload

Settings and the product store are injected into ``create_app`` and
kept on ``app.state``; when omitted, the process-wide ``settings`` and
a store loaded with the seed data are used.
"""

from typing import Any, Dict, Optional

from fastapi import FastAPI

from .core.config import Settings, settings as default_settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.request_logging import register_request_logging
from .api.router import router as api_router
from .services.product_service import ProductStore


def create_app(settings: Optional[Settings] = None, store: Optional[ProductStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration for this application.  Defaults to the
        environment-derived module-level settings.
    store : Optional[ProductStore]
        Product store to serve.  Defaults to a new store holding the
        seed products.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the components
    # below can safely log messages.
    setup_logging(settings)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.store = store if store is not None else ProductStore.with_seed_data()

    register_request_logging(app)
    register_exception_handlers(app)

    prefix = settings.api_prefix.rstrip("/")

    @app.get("/")
    async def root() -> Dict[str, Any]:
        return {
            "message": f"Hello World! Welcome to {settings.project_name}",
            "endpoints": {
                "getAll": f"GET {prefix}/products",
                "getById": f"GET {prefix}/products/:id",
                "create": f"POST {prefix}/products",
                "update": f"PUT {prefix}/products/:id",
                "delete": f"DELETE {prefix}/products/:id",
                "search": f"GET {prefix}/products/search?q=name",
                "stats": f"GET {prefix}/products/stats",
            },
        }

    app.include_router(api_router, prefix=prefix)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
