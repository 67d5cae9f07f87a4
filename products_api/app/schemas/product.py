"""
Pydantic models for product data.

Field names are snake_case in Python and camelCase on the wire
(``inStock``, ``totalPages`` ...).  ``ProductCreate`` and
``ProductUpdate`` carry the field rules for incoming payloads as
``mode="before"`` validators, so they see the raw JSON values and
every failing field is reported with its own message.
"""

import math
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


def parse_price(value: Any) -> Optional[float]:
    """Return ``value`` as a positive finite float, or ``None`` if it is not one.

    Numbers and numeric strings (``"12.50"``) are accepted; booleans are not.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        return None
    try:
        price = float(value.strip() if isinstance(value, str) else value)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(price) or price <= 0:
        return None
    return price


def _non_empty_string(value: Any, message: str) -> str:
    if isinstance(value, str) and value.strip():
        return value
    raise ValueError(message)


class Product(BaseModel):
    """A stored product.  ``id`` is assigned by the store and never changes."""

    id: str
    name: str = Field(..., examples=["Laptop"])
    description: str = Field(..., examples=["High-performance gaming laptop"])
    price: float = Field(..., gt=0, examples=[1299.99])
    category: str = Field(..., examples=["Electronics"])
    in_stock: bool = Field(False, alias="inStock", examples=[True])

    model_config = {
        "populate_by_name": True,
    }


class ProductCreate(BaseModel):
    """Schema for creating a product.

    Missing fields default to ``None`` and are still validated, so an
    empty payload reports every required field.
    """

    name: str = Field(None, validate_default=True)
    description: str = Field(None, validate_default=True)
    price: float = Field(None, gt=0, validate_default=True)
    category: str = Field(None, validate_default=True)
    in_stock: bool = Field(False, alias="inStock")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return _non_empty_string(v, "Name is required and must be a non-empty string")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return _non_empty_string(v, "Description is required and must be a non-empty string")

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        price = parse_price(v)
        if price is None:
            raise ValueError("Price is required and must be a positive number")
        return price

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return _non_empty_string(v, "Category is required and must be a non-empty string")

    @field_validator("in_stock", mode="before")
    @classmethod
    def coerce_in_stock(cls, v):
        return bool(v)


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional; only fields explicitly set are applied.
    ``inStock`` must be a real boolean when present.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(None, alias="inStock")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return _non_empty_string(v, "Name must be a non-empty string")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return _non_empty_string(v, "Description must be a non-empty string")

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        price = parse_price(v)
        if price is None:
            raise ValueError("Price must be a positive number")
        return price

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v):
        return _non_empty_string(v, "Category must be a non-empty string")

    @field_validator("in_stock", mode="before")
    @classmethod
    def validate_in_stock(cls, v):
        if not isinstance(v, bool):
            raise ValueError("inStock must be a boolean")
        return v


class ProductPage(BaseModel):
    """One page of a filtered product listing."""

    total: int
    page: int
    limit: int
    total_pages: int = Field(..., alias="totalPages")
    data: List[Product]

    model_config = {
        "populate_by_name": True,
    }


class ProductSearchResult(BaseModel):
    query: str
    total: int
    results: List[Product]


class PriceStats(BaseModel):
    """Price aggregates; all ``None`` when there are no products."""

    highest: Optional[float] = None
    lowest: Optional[float] = None
    average: Optional[float] = None


class ProductStats(BaseModel):
    total_products: int = Field(..., alias="totalProducts")
    in_stock: int = Field(..., alias="inStock")
    out_of_stock: int = Field(..., alias="outOfStock")
    categories: Dict[str, int]
    price_stats: PriceStats = Field(..., alias="priceStats")

    model_config = {
        "populate_by_name": True,
    }


class ProductMessage(BaseModel):
    """Response body for write operations."""

    message: str
    product: Product
