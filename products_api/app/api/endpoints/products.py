"""
Product endpoints.

Reads are public; create, update and delete require the API key.
Write handlers authenticate first (``require_api_key`` dependency),
then validate the body, and only then touch the store.  Failures are
raised as ``ProductsAPIError`` subclasses and rendered by the error
responder registered in ``core.errors``.

``/search`` and ``/stats`` are declared before ``/{product_id}`` so
they are not captured as product ids.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from products_api.app.api.deps import get_store
from products_api.app.core.security import require_api_key
from products_api.app.schemas.product import (
    Product,
    ProductMessage,
    ProductPage,
    ProductSearchResult,
    ProductStats,
)
from products_api.app.services.product_service import DEFAULT_LIMIT, DEFAULT_PAGE, ProductStore
from products_api.app.services.product_validation import validate_create, validate_update

router = APIRouter()


def parse_positive_int(value: Optional[str], default: int) -> int:
    """Parse a pagination parameter, falling back to ``default``.

    Missing, non-numeric and non-positive values all yield the default.
    """
    try:
        number = int(value) if value is not None else default
    except ValueError:
        return default
    return number if number >= 1 else default


def parse_in_stock(value: Optional[str]) -> Optional[bool]:
    """Interpret the ``inStock`` filter: ``"true"`` is in stock, anything else is not.

    An absent or empty value disables the filter.
    """
    if not value:
        return None
    return value == "true"


@router.get("", response_model=ProductPage)
async def list_products(
    category: Optional[str] = Query(None),
    in_stock: Optional[str] = Query(None, alias="inStock"),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: ProductStore = Depends(get_store),
) -> ProductPage:
    """List products with optional filters and pagination.

    - **category** : case-insensitive exact match.
    - **inStock** : ``true`` or ``false``.
    - **page**, **limit** : 1-based page number and page size (defaults 1 and 10).
    """
    return store.list(
        category=category,
        in_stock=parse_in_stock(in_stock),
        page=parse_positive_int(page, DEFAULT_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT),
    )


@router.get("/search", response_model=ProductSearchResult)
async def search_products(
    q: Optional[str] = Query(None),
    store: ProductStore = Depends(get_store),
) -> ProductSearchResult:
    """Search products by name or description.  Returns 400 without ``q``."""
    return store.search(q)


@router.get("/stats", response_model=ProductStats)
async def product_stats(store: ProductStore = Depends(get_store)) -> ProductStats:
    return store.stats()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, store: ProductStore = Depends(get_store)) -> Product:
    """Retrieve a single product.  Returns 404 if it does not exist."""
    return store.get(product_id)


@router.post(
    "",
    response_model=ProductMessage,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
async def create_product(
    payload: Any = Body(None),
    store: ProductStore = Depends(get_store),
) -> ProductMessage:
    """Create a product (API key required)."""
    product_in = validate_create(payload if payload is not None else {})
    product = store.create(product_in)
    return ProductMessage(message="Product created successfully", product=product)


@router.put(
    "/{product_id}",
    response_model=ProductMessage,
    dependencies=[Depends(require_api_key)],
)
async def update_product(
    product_id: str,
    payload: Any = Body(None),
    store: ProductStore = Depends(get_store),
) -> ProductMessage:
    """Partially update a product (API key required).

    Fields missing from the body keep their current values; the id
    cannot be changed.
    """
    patch = validate_update(payload if payload is not None else {})
    product = store.update(product_id, patch)
    return ProductMessage(message="Product updated successfully", product=product)


@router.delete(
    "/{product_id}",
    response_model=ProductMessage,
    dependencies=[Depends(require_api_key)],
)
async def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_store),
) -> ProductMessage:
    """Delete a product and return it (API key required)."""
    product = store.delete(product_id)
    return ProductMessage(message="Product deleted successfully", product=product)
