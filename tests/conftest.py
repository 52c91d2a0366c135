from datetime import datetime, timezone

import pytest

from rest_framework.test import APIClient

from modules.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def make_product():
    """Factory persisting a Product straight through the ORM."""

    def _make(**overrides) -> Product:
        stamp = overrides.pop(
            "created_at", datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        )
        defaults = {
            "name": "Mechanical Keyboard",
            "description": "87-key tenkeyless",
            "manager": "Kim Minji",
            "password": "s3cret!",
            "created_at": stamp,
            "updated_at": stamp,
        }
        defaults.update(overrides)
        product = Product(**defaults)
        product.save()
        return product

    return _make


@pytest.fixture()
def sample_product(make_product):
    """A persisted Product instance."""
    return make_product()
