# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from products_api.config import Settings
from products_api.core import CatalogService
from products_api.main import create_app


@pytest.fixture
def settings():
    return Settings(environment="test", https_redirect=False, seed_catalog=True, enable_reset=False)


@pytest.fixture
def catalog():
    return CatalogService()


@pytest.fixture
def app(settings, catalog):
    return create_app(settings, catalog)


@pytest.fixture
def client(app):
    return TestClient(app)
