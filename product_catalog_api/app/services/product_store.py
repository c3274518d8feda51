"""
In‑memory product store.

``ProductStore`` keeps products in insertion order for the lifetime of
the process.  One store belongs to one application instance (see
``main.create_app``); nothing here is module‑level state.  Operations
do not validate their input; callers validate payloads first.

Every operation takes ``lock``.  The lock is re‑entrant so the service
layer can hold it across a lookup followed by a mutation.
"""

import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional

from ..schemas.product import Product


def new_product_id() -> str:
    """Return a fresh random (UUID4) product identifier."""
    return str(uuid.uuid4())


class ProductStore:
    """Ordered, lock‑guarded collection of ``Product`` records."""

    def __init__(self, products: Optional[Iterable[Product]] = None) -> None:
        self.lock = threading.RLock()
        self._products: List[Product] = list(products or [])

    def __len__(self) -> int:
        with self.lock:
            return len(self._products)

    def all(self) -> List[Product]:
        """Return a snapshot of all products in insertion order."""
        with self.lock:
            return list(self._products)

    def find_by_id(self, product_id: Any) -> Optional[Product]:
        key = str(product_id)
        with self.lock:
            for product in self._products:
                if product.id == key:
                    return product
        return None

    def insert(self, product: Product) -> Product:
        with self.lock:
            self._products.append(product)
        return product

    def update(self, existing: Product, patch: Dict[str, Any]) -> Product:
        """Overwrite the fields present in ``patch`` on ``existing``.

        Keys whose value is ``None`` are treated as absent.  ``id`` can
        never be changed.
        """
        with self.lock:
            for field, value in patch.items():
                if field == "id" or value is None:
                    continue
                setattr(existing, field, value)
        return existing

    def remove(self, product_id: Any) -> bool:
        """Remove the product with ``product_id``; return whether one was found."""
        key = str(product_id)
        with self.lock:
            for index, product in enumerate(self._products):
                if product.id == key:
                    del self._products[index]
                    return True
        return False
