"""
Unit tests for the create and update payload validators.
"""

import math

import pytest

from product_catalog_api.app.core.errors import ValidationError
from product_catalog_api.app.services.validators import (
    is_valid_price,
    recognised_fields,
    validate_create,
    validate_update,
)

REQUIRED = "All input fields are required: name, description, price, category, inStock"
STRINGS = "name, description, and category must be strings"
PRICE = "price must be a non-negative number"
IN_STOCK = "inStock must be a boolean"
EMPTY_UPDATE = "At least one field must be provided for update"


def valid_payload(**overrides):
    payload = {
        "name": "Mouse",
        "description": "Wireless mouse",
        "price": 25.5,
        "category": "electronics",
        "inStock": True,
    }
    payload.update(overrides)
    return payload


def assert_rejected(func, payload, message):
    with pytest.raises(ValidationError) as exc_info:
        func(payload)
    assert exc_info.value.message == message
    assert exc_info.value.status_code == 400


class TestValidateCreate:
    """Tests for validate_create."""

    def test_accepts_valid_payload(self):
        validate_create(valid_payload())
        validate_create(valid_payload(price=0, inStock=False))

    @pytest.mark.parametrize("missing", ["name", "description", "price", "category", "inStock"])
    def test_missing_field(self, missing):
        payload = valid_payload()
        del payload[missing]
        assert_rejected(validate_create, payload, REQUIRED)

    def test_empty_name_counts_as_missing(self):
        assert_rejected(validate_create, valid_payload(name=""), REQUIRED)

    @pytest.mark.parametrize("value", [None, "", 0, False])
    def test_falsy_values_count_as_missing(self, value):
        assert_rejected(validate_create, valid_payload(description=value), REQUIRED)

    @pytest.mark.parametrize("value", [[], {}])
    def test_empty_containers_count_as_present(self, value):
        assert_rejected(validate_create, valid_payload(name=value), STRINGS)
        assert_rejected(validate_create, valid_payload(category=value), STRINGS)

    def test_null_price_is_present_but_wrong_type(self):
        assert_rejected(validate_create, valid_payload(price=None), PRICE)

    def test_non_string_fields(self):
        assert_rejected(validate_create, valid_payload(category=5), STRINGS)
        assert_rejected(validate_create, valid_payload(name=["Mouse"]), STRINGS)

    @pytest.mark.parametrize("price", [-1, "25", True, math.inf, math.nan, 10 ** 400])
    def test_bad_price(self, price):
        assert_rejected(validate_create, valid_payload(price=price), PRICE)

    def test_bad_in_stock(self):
        assert_rejected(validate_create, valid_payload(inStock="yes"), IN_STOCK)
        assert_rejected(validate_create, valid_payload(inStock=1), IN_STOCK)

    def test_checks_run_in_order(self):
        # wrong string type and wrong price: the string check wins
        assert_rejected(validate_create, valid_payload(name=1, price=-5), STRINGS)
        # wrong price and wrong inStock: the price check wins
        assert_rejected(validate_create, valid_payload(price=-5, inStock="no"), PRICE)


class TestValidateUpdate:
    """Tests for validate_update."""

    def test_accepts_single_field(self):
        validate_update({"price": 30})
        validate_update({"inStock": False})
        validate_update({"name": "New"})

    def test_empty_payload(self):
        assert_rejected(validate_update, {}, EMPTY_UPDATE)

    def test_only_unknown_fields(self):
        assert_rejected(validate_update, {"colour": "red"}, EMPTY_UPDATE)

    @pytest.mark.parametrize("field", ["name", "description", "category"])
    def test_string_fields(self, field):
        assert_rejected(validate_update, {field: 1}, f"{field} must be a string")

    def test_null_counts_as_present(self):
        assert_rejected(validate_update, {"name": None}, "name must be a string")

    def test_bad_price_and_in_stock(self):
        assert_rejected(validate_update, {"price": -0.01}, PRICE)
        assert_rejected(validate_update, {"inStock": "true"}, IN_STOCK)

    def test_check_order(self):
        assert_rejected(
            validate_update,
            {"inStock": "x", "price": -1, "category": 3, "description": 2},
            "description must be a string",
        )


def test_is_valid_price():
    assert is_valid_price(0)
    assert is_valid_price(19.99)
    assert not is_valid_price(False)
    assert not is_valid_price(None)
    assert not is_valid_price(10 ** 400)
    assert is_valid_price(10 ** 300)


def test_recognised_fields_drops_unknown_keys():
    payload = {"price": 5, "in_stock": True, "id": "9", "inStock": False}

    assert recognised_fields(payload) == {"price": 5, "inStock": False}
