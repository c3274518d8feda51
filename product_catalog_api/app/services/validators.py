"""
Payload validators for product create and update requests.

Both functions are pure: they inspect a decoded JSON object and raise
``ValidationError`` with a single message describing the first failing
check.  Checks run in a fixed order so clients always get the same
message for the same payload.
"""

import math
from typing import Any, Dict

from ..core.errors import ValidationError

PRODUCT_FIELDS = ("name", "description", "price", "category", "inStock")


def is_valid_price(value: Any) -> bool:
    # bool is a subclass of int but is not a number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return is_finite_number(value) and value >= 0


def is_finite_number(value: Any) -> bool:
    """Whether ``value`` fits in a finite float; huge JSON integers do not."""
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def is_blank(value: Any) -> bool:
    """Missing, null, empty string, false or zero.

    Lists and objects count as present so the type check rejects them.
    """
    return value is None or value == "" or (isinstance(value, (int, float)) and not value)


def recognised_fields(payload: Dict[str, Any]) -> Dict[str, Any]:
    """Keep only the product keys clients may send; everything else is ignored."""
    return {key: payload[key] for key in PRODUCT_FIELDS if key in payload}


def validate_create(payload: Dict[str, Any]) -> None:
    """Validate the body of a create request.

    Order: presence of all five fields, string type of name /
    description / category, price, inStock.
    """
    if (
        is_blank(payload.get("name"))
        or is_blank(payload.get("description"))
        or "price" not in payload
        or is_blank(payload.get("category"))
        or "inStock" not in payload
    ):
        raise ValidationError(
            "All input fields are required: name, description, price, category, inStock"
        )
    if not all(isinstance(payload[key], str) for key in ("name", "description", "category")):
        raise ValidationError("name, description, and category must be strings")
    if not is_valid_price(payload["price"]):
        raise ValidationError("price must be a non-negative number")
    if not isinstance(payload["inStock"], bool):
        raise ValidationError("inStock must be a boolean")


def validate_update(payload: Dict[str, Any]) -> None:
    """Validate the body of an update request.

    Every field is optional, but a field that is present (even as
    ``null``) must have the right type, and at least one known field
    must be present.
    """
    for key in ("name", "description", "category"):
        if key in payload and not isinstance(payload[key], str):
            raise ValidationError(f"{key} must be a string")
    if "price" in payload and not is_valid_price(payload["price"]):
        raise ValidationError("price must be a non-negative number")
    if "inStock" in payload and not isinstance(payload["inStock"], bool):
        raise ValidationError("inStock must be a boolean")
    if not any(key in payload for key in PRODUCT_FIELDS):
        raise ValidationError("At least one field must be provided for update")
