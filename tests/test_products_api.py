# tests/test_products_api.py
from datetime import datetime, timezone

from fastapi.testclient import TestClient

from products_api.main import create_app

NEW_PRODUCT = {
    "name": "Widget",
    "description": "A very useful widget",
    "price": 19.99,
    "stockQuantity": 7,
    "category": "Gadgets",
}


def test_list_seeded_products(client):
    r = client.get("/api/products")
    assert r.status_code == 200
    body = r.json()
    assert [p["id"] for p in body] == [1, 2, 3]
    assert set(body[0]) == {"id", "name", "description", "price", "stockQuantity", "category", "createdAt"}
    assert body[0]["price"] == 1299.99
    assert body[1]["stockQuantity"] == 50


def test_get_product(client):
    r = client.get("/api/products/2")
    assert r.status_code == 200
    assert r.json()["name"] == "Wireless Mouse"


def test_get_missing_product(client):
    r = client.get("/api/products/999")
    assert r.status_code == 404
    assert r.json() == {"message": "Product with ID 999 not found"}


def test_create_product(client):
    before = datetime.now(timezone.utc)
    r = client.post("/api/products", json={**NEW_PRODUCT, "id": 77, "createdAt": "2001-01-01T00:00:00Z"})
    after = datetime.now(timezone.utc)
    assert r.status_code == 201
    body = r.json()
    assert body["id"] == 4
    assert r.headers["location"] == "http://testserver/api/products/4"
    created_at = datetime.fromisoformat(body["createdAt"].replace("Z", "+00:00"))
    assert before <= created_at <= after

    fetched = client.get("/api/products/4").json()
    assert fetched == body
    for key, value in NEW_PRODUCT.items():
        assert fetched[key] == value


def test_create_without_body(client):
    r = client.post("/api/products")
    assert r.status_code == 400
    assert "Product data is required" in r.json()["message"]


def test_create_with_null_body(client):
    r = client.post("/api/products", content="null", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json()["message"] == "Product data is required"


def test_create_without_name_is_validation_error(client):
    r = client.post("/api/products", json={"price": 1})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "One or more validation errors occurred."
    assert body["errors"]


def test_malformed_json_is_validation_error(client):
    r = client.post("/api/products", content="{not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400


def test_non_integer_id_is_validation_error(client):
    assert client.get("/api/products/abc").status_code == 400


def test_update_product(client):
    r = client.put("/api/products/1", json={**NEW_PRODUCT, "id": 1})
    assert r.status_code == 204
    assert r.content == b""
    fetched = client.get("/api/products/1").json()
    assert fetched["name"] == "Widget"
    assert fetched["stockQuantity"] == 7
    assert fetched["id"] == 1


def test_update_keeps_created_at(client):
    original = client.get("/api/products/3").json()
    client.put("/api/products/3", json={**NEW_PRODUCT, "id": 3, "createdAt": "2001-01-01T00:00:00Z"})
    assert client.get("/api/products/3").json()["createdAt"] == original["createdAt"]


def test_update_id_mismatch(client):
    r = client.put("/api/products/5", json={**NEW_PRODUCT, "id": 7})
    assert r.status_code == 400
    assert r.json()["message"] == "Product ID mismatch or invalid data"
    # mismatch wins even when the product exists
    assert client.put("/api/products/1", json={**NEW_PRODUCT, "id": 2}).status_code == 400
    # an id-less body never matches
    assert client.put("/api/products/1", json=NEW_PRODUCT).status_code == 400


def test_update_without_body(client):
    assert client.put("/api/products/1").status_code == 400


def test_update_missing_product(client):
    r = client.put("/api/products/999", json={**NEW_PRODUCT, "id": 999})
    assert r.status_code == 404
    assert r.json()["message"] == "Product with ID 999 not found"


def test_delete_then_get(client):
    r = client.delete("/api/products/1")
    assert r.status_code == 204
    assert client.get("/api/products/1").status_code == 404
    assert client.delete("/api/products/1").status_code == 404


def test_delete_middle_then_create_gets_next_after_max(client):
    assert client.delete("/api/products/2").status_code == 204
    r = client.post("/api/products", json=NEW_PRODUCT)
    assert r.json()["id"] == 4
    ids = [p["id"] for p in client.get("/api/products").json()]
    assert ids == [1, 3, 4]
    assert len(ids) == len(set(ids))


def test_reset_route_disabled_by_default(client):
    assert client.post("/api/products/reset").status_code in (404, 405)


def test_reset_route(settings, catalog):
    settings.enable_reset = True
    client = TestClient(create_app(settings, catalog))
    client.delete("/api/products/1")
    r = client.post("/api/products/reset")
    assert r.status_code == 200
    assert [p["id"] for p in client.get("/api/products").json()] == [1, 2, 3]


def test_unseeded_app_starts_empty(settings):
    settings.seed_catalog = False
    client = TestClient(create_app(settings))
    assert client.get("/api/products").json() == []
    assert client.post("/api/products", json=NEW_PRODUCT).json()["id"] == 1


def test_docs_only_in_development(settings, catalog):
    assert TestClient(create_app(settings, catalog)).get("/").status_code == 404
    settings.environment = "development"
    assert TestClient(create_app(settings, catalog)).get("/").status_code == 200
