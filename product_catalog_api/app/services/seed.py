"""Demo products installed when the application starts."""

from typing import List

from ..schemas.product import Product


def seed_products() -> List[Product]:
    """Return fresh copies of the three demo products (ids "1" to "3")."""
    return [
        Product(
            id="1",
            name="Laptop",
            description="High-performance laptop with 16GB RAM",
            price=1200,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="2",
            name="Smartphone",
            description="Latest model with 128GB storage",
            price=800,
            category="electronics",
            in_stock=True,
        ),
        Product(
            id="3",
            name="Coffee Maker",
            description="Programmable coffee maker with timer",
            price=50,
            category="kitchen",
            in_stock=False,
        ),
    ]
