"""
Unit tests for the logging configuration.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.config import Settings
from product_catalog_api.app.core.logging_config import (
    ACCESS_LOGGER,
    ERROR_LOGGER,
    configure_request_loggers,
    setup_logging,
)
from product_catalog_api.app.main import create_app


@pytest.fixture(autouse=True)
def restore_request_loggers():
    yield
    configure_request_loggers(access_log=True)


def test_request_loggers_have_fixed_levels():
    setup_logging("WARNING")

    assert logging.getLogger(ACCESS_LOGGER).level == logging.INFO
    assert logging.getLogger(ERROR_LOGGER).level == logging.ERROR


def test_access_log_can_be_disabled():
    setup_logging("INFO", access_log=False)

    assert not logging.getLogger(ACCESS_LOGGER).isEnabledFor(logging.INFO)
    assert logging.getLogger(ERROR_LOGGER).isEnabledFor(logging.ERROR)


def test_disabled_access_log_writes_no_request_lines(caplog):
    app = create_app(settings=Settings(api_key="k", log_level="WARNING", access_log=False))
    with TestClient(app) as client:
        client.get("/api/products/stats")

    assert not [r for r in caplog.records if r.name == ACCESS_LOGGER]


def test_enabled_access_log_writes_request_lines(caplog):
    app = create_app(settings=Settings(api_key="k", log_level="WARNING", access_log=True))
    with TestClient(app) as client:
        client.get("/api/products/stats")

    lines = [r.getMessage() for r in caplog.records if r.name == ACCESS_LOGGER]
    assert lines == ["GET /api/products/stats"]
