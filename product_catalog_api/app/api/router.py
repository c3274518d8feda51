"""
Top‑level API router.

Aggregates the domain routers.  The welcome route is mounted at the
root; product routes live under ``/api/products``.
"""

from fastapi import APIRouter

from .endpoints import info, products

router = APIRouter()

router.include_router(info.router, tags=["info"])
router.include_router(products.router, prefix="/api/products", tags=["products"])
