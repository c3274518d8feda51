"""
Filtering, search, pagination and statistics over product lists.

The functions here never touch the store; they receive a snapshot list
of products and return plain dictionaries that the API layer turns into
response models.  Original insertion order is preserved everywhere.
"""

from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from ..schemas.product import Product

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_positive_int(raw: Any, default: int) -> int:
    """Parse a query value into an integer ≥ 1.

    Like JavaScript's ``parseInt`` only the leading digits count
    (``"2abc"`` is 2).  Missing, unparsable and zero values fall back to
    ``default``; negative values are clamped to 1.
    """
    if raw is None:
        return default
    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        value = int(match.group(1)) if match else 0
    return max(value or default, 1)


def filter_by_category(products: List[Product], category: str) -> List[Product]:
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def filter_by_name(products: List[Product], term: str) -> List[Product]:
    needle = term.lower()
    return [p for p in products if needle in p.name.lower()]


def list_products(
    products: List[Product],
    category: Optional[str] = None,
    q: Optional[str] = None,
    page: Any = None,
    limit: Any = None,
) -> Dict[str, Any]:
    """Filter, then paginate.

    ``total`` is the number of products left after filtering, not the
    size of the returned page.
    """
    result = list(products)
    if category:
        result = filter_by_category(result, category)
    if q:
        result = filter_by_name(result, q)

    page_number = parse_positive_int(page, DEFAULT_PAGE)
    page_size = parse_positive_int(limit, DEFAULT_LIMIT)
    start = (page_number - 1) * page_size
    return {
        "page": page_number,
        "limit": page_size,
        "total": len(result),
        "results": result[start:start + page_size],
    }


def search_products(products: List[Product], q: Optional[str] = None) -> Dict[str, Any]:
    """Case‑insensitive substring search on product names, unpaginated.

    An empty term matches every product.
    """
    results = filter_by_name(products, q or "")
    return {"total": len(results), "results": results}


def product_stats(products: List[Product]) -> Dict[str, Any]:
    """Count products overall and per category.

    Categories are grouped verbatim, so ``"Kitchen"`` and ``"kitchen"``
    are counted separately even though the category filter treats them
    as equal.
    """
    by_category: Dict[str, int] = {}
    for product in products:
        by_category[product.category] = by_category.get(product.category, 0) + 1
    return {"total": len(products), "byCategory": by_category}
