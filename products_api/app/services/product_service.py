"""
In-memory product store.

``ProductStore`` keeps products in a plain list, preserving insertion
order.  The application owns exactly one instance (created in
``create_app``) and hands it to the endpoints through a dependency, so
state lives for the lifetime of the process and is reset to the seed
data on restart.  All operations are synchronous and run to
completion, which is why no locking is needed.
"""

from __future__ import annotations

import logging
import math
import uuid
from typing import Dict, Iterable, List, Optional

from ..core.errors import NotFoundError, ProductsAPIError
from ..schemas.product import (
    PriceStats,
    Product,
    ProductCreate,
    ProductPage,
    ProductSearchResult,
    ProductStats,
    ProductUpdate,
)


logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

SEED_PRODUCTS: List[Dict[str, object]] = [
    {
        "id": "1",
        "name": "Laptop",
        "description": "High-performance gaming laptop",
        "price": 1299.99,
        "category": "Electronics",
        "inStock": True,
    },
    {
        "id": "2",
        "name": "Coffee Mug",
        "description": "Ceramic coffee mug with handle",
        "price": 12.99,
        "category": "Kitchen",
        "inStock": True,
    },
    {
        "id": "3",
        "name": "Desk Lamp",
        "description": "LED desk lamp with adjustable brightness",
        "price": 34.99,
        "category": "Home",
        "inStock": False,
    },
]


class ProductStore:
    """Ordered, in-memory collection of products."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self._products: List[Product] = list(products or [])

    @classmethod
    def with_seed_data(cls) -> "ProductStore":
        """Return a store holding a fresh copy of ``SEED_PRODUCTS``."""
        return cls(Product.model_validate(item) for item in SEED_PRODUCTS)

    def __len__(self) -> int:
        return len(self._products)

    def all(self) -> List[Product]:
        return list(self._products)

    def _index_of(self, product_id: str) -> int:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        raise NotFoundError("Product not found")

    def list(
        self,
        category: Optional[str] = None,
        in_stock: Optional[bool] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> ProductPage:
        """Return one page of products matching every supplied filter.

        ``category`` is compared case-insensitively.  ``page`` is
        1-based; a page past the end yields an empty ``data`` list.
        ``total`` and ``total_pages`` describe the filtered set before
        slicing.
        """
        page = page if page >= 1 else DEFAULT_PAGE
        limit = limit if limit >= 1 else DEFAULT_LIMIT

        matches = self._products
        if category:
            wanted = category.lower()
            matches = [p for p in matches if p.category.lower() == wanted]
        if in_stock is not None:
            matches = [p for p in matches if p.in_stock == in_stock]

        start = (page - 1) * limit
        return ProductPage(
            total=len(matches),
            page=page,
            limit=limit,
            total_pages=math.ceil(len(matches) / limit),
            data=matches[start:start + limit],
        )

    def get(self, product_id: str) -> Product:
        return self._products[self._index_of(product_id)]

    def create(self, data: ProductCreate) -> Product:
        product = Product(id=str(uuid.uuid4()), **data.model_dump())
        self._products.append(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    def update(self, product_id: str, patch: ProductUpdate) -> Product:
        """Overwrite the fields set on ``patch``; the id is never changed."""
        index = self._index_of(product_id)
        changes = patch.model_dump(exclude_unset=True)
        changes["id"] = product_id
        updated = self._products[index].model_copy(update=changes)
        self._products[index] = updated
        logger.info("Updated product %s: %s", product_id, sorted(changes))
        return updated

    def delete(self, product_id: str) -> Product:
        index = self._index_of(product_id)
        removed = self._products.pop(index)
        logger.info("Deleted product %s", product_id)
        return removed

    def search(self, query: Optional[str]) -> ProductSearchResult:
        """Case-insensitive substring search over name and description.

        The lowercased query is echoed back in the result.
        """
        if not query:
            raise ProductsAPIError("Search query is required", status_code=400)
        needle = query.lower()
        results = [
            p for p in self._products
            if needle in p.name.lower() or needle in p.description.lower()
        ]
        return ProductSearchResult(query=needle, total=len(results), results=results)

    def stats(self) -> ProductStats:
        """Aggregate counts and price statistics over the whole collection.

        With no products the price statistics are all ``None``.
        """
        in_stock = sum(1 for p in self._products if p.in_stock)
        categories: Dict[str, int] = {}
        for product in self._products:
            categories[product.category] = categories.get(product.category, 0) + 1

        prices = [p.price for p in self._products]
        if prices:
            price_stats = PriceStats(
                highest=max(prices),
                lowest=min(prices),
                average=sum(prices) / len(prices),
            )
        else:
            price_stats = PriceStats()

        return ProductStats(
            total_products=len(self._products),
            in_stock=in_stock,
            out_of_stock=len(self._products) - in_stock,
            categories=categories,
            price_stats=price_stats,
        )
