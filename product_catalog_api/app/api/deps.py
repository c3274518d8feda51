"""
API dependencies.

Provides dependency injection for the product service and a helper for
decoding request bodies.  The store lives on ``app.state`` so each
application instance (and each test) has its own products.
"""

import json
from typing import Any, Dict

from fastapi import Request

from ..core.errors import ValidationError
from ..services.product_service import ProductService


def get_product_service(request: Request) -> ProductService:
    """
    Get Product Service bound to the application's store

    Returns:
        ProductService: service instance for this request
    """
    return ProductService(request.app.state.store)


async def read_json_object(request: Request) -> Dict[str, Any]:
    """Decode the request body as a JSON object.

    An empty body is treated as ``{}`` so that the validators can report
    the missing fields.
    """
    body = await request.body()
    if not body.strip():
        return {}
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise ValidationError("Invalid JSON body") from exc
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload
