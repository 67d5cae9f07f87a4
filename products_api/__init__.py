"""
Top-level package for the Products API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn products_api.app.main:app``.
"""

__all__ = []
