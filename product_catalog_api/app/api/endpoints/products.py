"""
Product endpoints.

Read routes (list, search, stats, get) are public.  Create, update and
delete require the ``x-api-key`` header, checked by the
``require_api_key`` dependency before the body is read.  Handlers only
delegate to ``ProductService``; every failure propagates to the error
handlers installed by ``core.errors``.

``/search`` and ``/stats`` are declared before ``/{product_id}`` so
that they are not captured as product ids.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, status

from product_catalog_api.app.api.deps import get_product_service, read_json_object
from product_catalog_api.app.core.security import require_api_key
from product_catalog_api.app.schemas.product import (
    MessageResponse,
    Product,
    ProductList,
    ProductMessage,
    ProductSearchResult,
    ProductStats,
)
from product_catalog_api.app.services.product_service import ProductService

router = APIRouter()


@router.get("", response_model=ProductList)
async def list_products(
    category: Optional[str] = Query(None),
    q: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    page: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> ProductList:
    """List products with filtering and pagination.

    - **category** : exact category, case‑insensitive.
    - **q** (or **name**) : substring of the product name, case‑insensitive.
    - **page**, **limit** : pagination; invalid values fall back to 1 and 10.
    """
    return await service.list_products(category=category, q=q or name, page=page, limit=limit)


@router.get("/search", response_model=ProductSearchResult)
async def search_products(
    q: Optional[str] = Query(None),
    name: Optional[str] = Query(None),
    service: ProductService = Depends(get_product_service),
) -> ProductSearchResult:
    """Search all products by name, without pagination."""
    return await service.search_products(q or name)


@router.get("/stats", response_model=ProductStats)
async def product_stats(service: ProductService = Depends(get_product_service)) -> ProductStats:
    """Return the product count overall and per category."""
    return await service.stats()


@router.get("/{product_id}", response_model=Product)
async def get_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Retrieve a single product by its ID.  Raises 404 if absent."""
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=ProductMessage,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
)
async def create_product(
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> ProductMessage:
    """Create a new product.  The id is generated by the server."""
    payload = await read_json_object(request)
    product = await service.create_product(payload)
    return ProductMessage(message="Product created successfully", product=product)


@router.put("/{product_id}", response_model=ProductMessage, dependencies=[Depends(require_api_key)])
async def update_product(
    product_id: str,
    request: Request,
    service: ProductService = Depends(get_product_service),
) -> ProductMessage:
    """Update an existing product.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    payload = await read_json_object(request)
    product = await service.update_product(product_id, payload)
    return ProductMessage(message="Product updated successfully", product=product)


@router.delete("/{product_id}", response_model=MessageResponse, dependencies=[Depends(require_api_key)])
async def delete_product(
    product_id: str,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete a product."""
    await service.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully")
