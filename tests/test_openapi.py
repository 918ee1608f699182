# tests/test_openapi.py
import json

from products_api.openapi import export_openapi


def test_document_describes_product_routes(client):
    doc = client.get("/swagger/v1/swagger.json").json()
    assert doc["info"]["title"] == "Products API"
    assert doc["info"]["version"] == "v1"
    assert doc["info"]["contact"]["email"] == "support@example.com"

    paths = doc["paths"]
    assert set(paths["/api/products"]) == {"get", "post"}
    assert set(paths["/api/products/{id}"]) == {"get", "put", "delete"}
    assert "201" in paths["/api/products"]["post"]["responses"]
    assert {"204", "400", "404"} <= set(paths["/api/products/{id}"]["put"]["responses"])
    assert "404" in paths["/api/products/{id}"]["delete"]["responses"]


def test_export_writes_document(app, tmp_path):
    target = tmp_path / "out" / "openapi.json"
    doc = export_openapi(app, target)
    assert json.loads(target.read_text(encoding="utf-8")) == doc
    assert "/api/products" in doc["paths"]
