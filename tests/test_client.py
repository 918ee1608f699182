# tests/test_client.py
import asyncio

import httpx
import pytest

from products_sdk import CatalogAPIError, CatalogClient


@pytest.fixture
def sdk(client, app):
    return CatalogClient(base_url="http://testserver", session=client,
                         async_transport=httpx.ASGITransport(app=app))


def test_crud_through_client(sdk):
    assert len(sdk.list_products()) == 3

    created = sdk.create_product("Desk Lamp", "34.50", 12, "LED lamp", "Home")
    assert created["id"] == 4
    assert created["price"] == 34.5

    sdk.update_product(4, "Desk Lamp", 30, 10, "LED lamp", "Home")
    assert sdk.get_product(4)["stockQuantity"] == 10

    sdk.delete_product(4)
    with pytest.raises(CatalogAPIError) as exc:
        sdk.get_product(4)
    assert exc.value.status_code == 404
    assert exc.value.message == "Product with ID 4 not found"


def test_update_missing_raises(sdk):
    with pytest.raises(CatalogAPIError) as exc:
        sdk.update_product(999, "Nope", 1, 1)
    assert exc.value.status_code == 404


def test_create_async(sdk):
    r = asyncio.run(sdk.create_product_async("Async thing", 2.25, 1))
    assert r.status_code == 201
    assert r.headers["location"].endswith("/api/products/4")
