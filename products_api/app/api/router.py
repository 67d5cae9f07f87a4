"""
Top-level API router.

Aggregates domain-specific routers under a unified prefix.  When new
endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import products

router = APIRouter()

router.include_router(products.router, prefix="/products", tags=["products"])
