"""
Pydantic models for product data.

``ProductBase`` holds the fields shared by requests and responses;
``ProductCreate`` is the validated body of a create request and
``Product`` adds the server‑generated ``id``.  ``ProductUpdate`` has
every field optional and is dumped with ``exclude_unset`` so only the
keys the client sent are applied.

On the wire the stock flag is called ``inStock``; in Python code it is
``in_stock``.  FastAPI serialises response models by alias, so clients
only ever see the camel‑case name.
"""

import math
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

# Integers stay integers on the wire (``1200`` rather than ``1200.0``).
Price = Union[int, float]


def _check_price(value):
    if value is None:
        return value
    try:
        finite = math.isfinite(value)
    except OverflowError:
        finite = False
    if not finite or value < 0:
        raise ValueError("price must be a non-negative number")
    return value


class ProductBase(BaseModel):
    name: str = Field(..., examples=["Laptop"])
    description: str = Field(..., examples=["High-performance laptop with 16GB RAM"])
    price: Price = Field(..., examples=[1200])
    category: str = Field(..., examples=["electronics"])
    in_stock: bool = Field(..., alias="inStock", examples=[True])

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _check_price(v)


class ProductCreate(ProductBase):
    """Schema for creating a product."""
    pass


class Product(ProductBase):
    """A product as held in the store and returned by the API."""

    id: str


class ProductUpdate(BaseModel):
    """Schema for updating a product.

    All fields are optional; only provided fields will be updated.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[Price] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = Field(None, alias="inStock")

    model_config = {
        "populate_by_name": True,
    }

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return _check_price(v)


class ProductList(BaseModel):
    """One page of a filtered product listing."""

    page: int
    limit: int
    total: int = Field(..., description="Number of products matching the filters, across all pages")
    results: List[Product]


class ProductSearchResult(BaseModel):
    total: int
    results: List[Product]


class ProductStats(BaseModel):
    total: int
    by_category: Dict[str, int] = Field(..., alias="byCategory")

    model_config = {
        "populate_by_name": True,
    }


class MessageResponse(BaseModel):
    message: str


class ProductMessage(MessageResponse):
    """Confirmation message together with the affected product."""

    product: Product
