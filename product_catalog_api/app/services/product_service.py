"""
Business logic for products.

``ProductService`` wraps one ``ProductStore``.  Read operations take a
snapshot of the store and hand it to the query helpers; write
operations validate the raw payload, convert it into a pydantic record
and only then touch the store.  Failures are raised as
``ValidationError`` or ``NotFoundError`` and left for the error
handlers registered in ``core.errors``.
"""

import logging
from typing import Any, Dict, Optional

from ..core.errors import NotFoundError
from ..schemas.product import (
    Product,
    ProductCreate,
    ProductList,
    ProductSearchResult,
    ProductStats,
    ProductUpdate,
)
from .product_query import list_products, product_stats, search_products
from .product_store import ProductStore, new_product_id
from .validators import recognised_fields, validate_create, validate_update

logger = logging.getLogger(__name__)

PRODUCT_NOT_FOUND = "Product not found"


class ProductService:
    """Service for listing, querying and modifying products."""

    def __init__(self, store: ProductStore) -> None:
        self.store = store

    async def list_products(
        self,
        category: Optional[str] = None,
        q: Optional[str] = None,
        page: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> ProductList:
        """Return one page of products filtered by category and name."""
        return ProductList(**list_products(self.store.all(), category=category, q=q, page=page, limit=limit))

    async def search_products(self, q: Optional[str] = None) -> ProductSearchResult:
        return ProductSearchResult(**search_products(self.store.all(), q))

    async def stats(self) -> ProductStats:
        return ProductStats(**product_stats(self.store.all()))

    async def get_product(self, product_id: str) -> Product:
        """Retrieve a single product or raise ``NotFoundError``."""
        product = self.store.find_by_id(product_id)
        if product is None:
            raise NotFoundError(PRODUCT_NOT_FOUND)
        return product

    async def create_product(self, payload: Dict[str, Any]) -> Product:
        """Validate ``payload`` and append a new product with a fresh id."""
        validate_create(payload)
        data = ProductCreate.model_validate(recognised_fields(payload))
        product = Product(id=new_product_id(), **data.model_dump())
        self.store.insert(product)
        logger.info("Created product %s (%s)", product.id, product.name)
        return product

    async def update_product(self, product_id: str, payload: Dict[str, Any]) -> Product:
        """Apply a partial update.

        The payload is validated before the lookup, so an invalid body is
        reported even when the id does not exist.
        """
        validate_update(payload)
        updates = ProductUpdate.model_validate(recognised_fields(payload)).model_dump(exclude_unset=True)
        with self.store.lock:
            product = self.store.find_by_id(product_id)
            if product is None:
                raise NotFoundError(PRODUCT_NOT_FOUND)
            self.store.update(product, updates)
        logger.info("Updated product %s: %s", product.id, ", ".join(sorted(updates)))
        return product

    async def delete_product(self, product_id: str) -> None:
        with self.store.lock:
            if not self.store.remove(product_id):
                raise NotFoundError(PRODUCT_NOT_FOUND)
        logger.info("Deleted product %s", product_id)
