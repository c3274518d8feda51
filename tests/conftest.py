"""
pytest configuration and fixtures.

Every test gets a freshly created application with its own seeded
store, so mutations made by one test never leak into another.
"""

from typing import Dict, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.main import create_app
from product_catalog_api.app.schemas.product import Product
from product_catalog_api.app.services.product_store import ProductStore
from product_catalog_api.app.services.seed import seed_products

TEST_API_KEY = "test-key"


@pytest.fixture
def settings() -> Settings:
    """Test configuration with a known API key."""
    return Settings(api_key=TEST_API_KEY, log_level="WARNING", seed_products=True)


@pytest.fixture
def store() -> ProductStore:
    """Store holding the three demo products."""
    return ProductStore(seed_products())


@pytest.fixture
def app(settings: Settings, store: ProductStore) -> FastAPI:
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Dict[str, str]:
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def mouse_payload() -> dict:
    """Valid create payload."""
    return {
        "name": "Mouse",
        "description": "d",
        "price": 25.5,
        "category": "electronics",
        "inStock": True,
    }


def make_product(product_id: str, name: str, category: str = "misc", price=10) -> Product:
    return Product(
        id=product_id,
        name=name,
        description=f"{name} description",
        price=price,
        category=category,
        in_stock=True,
    )
