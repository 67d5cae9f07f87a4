"""Shared fixtures: an isolated app per test with its own settings and store."""

import pytest
from fastapi.testclient import TestClient

from products_api.app.core.config import Settings
from products_api.app.main import create_app
from products_api.app.services.product_service import ProductStore

TEST_API_KEY = "test-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(api_key=TEST_API_KEY, environment="test", api_prefix="")


@pytest.fixture
def store() -> ProductStore:
    return ProductStore.with_seed_data()


@pytest.fixture
def app(settings: Settings, store: ProductStore):
    return create_app(settings=settings, store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> dict:
    return {"x-api-key": TEST_API_KEY}
