# products_sdk/client.py
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

import httpx
import requests
from rich import print

Number = Union[int, float, Decimal, str]


class CatalogAPIError(Exception):
    def __init__(self, status_code: int, message: str):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message


def _error_message(r) -> str:
    try:
        body = r.json()
    except ValueError:
        return r.text
    if isinstance(body, dict) and "message" in body:
        return body["message"]
    return r.text


def _product_payload(
    name: str,
    price: Number,
    stock_quantity: int,
    description: Optional[str],
    category: Optional[str],
    product_id: int = 0,
) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": name,
        "description": description,
        "price": float(price),
        "stockQuantity": stock_quantity,
        "category": category,
    }


class CatalogClient:
    """Thin client for the Products API.

    ``session`` can be any object with the requests.Session call surface,
    which includes FastAPI's TestClient. ``async_transport`` is handed to
    the httpx.AsyncClient used by the async helpers.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:8085",
        api_key: Optional[str] = None,
        timeout: int = 10,
        session=None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout
        self.async_transport = async_transport
        self.headers: Dict[str, str] = {}
        if api_key:
            self.headers["Authorization"] = f"Bearer {api_key}"
            self.session.headers.update(self.headers)

    @property
    def products_url(self) -> str:
        return f"{self.base_url}/api/products"

    def _check(self, r):
        if r.status_code >= 400:
            raise CatalogAPIError(r.status_code, _error_message(r))
        return r

    def list_products(self) -> List[Dict[str, Any]]:
        r = self.session.get(self.products_url, timeout=self.timeout)
        return self._check(r).json()

    def get_product(self, product_id: int) -> Dict[str, Any]:
        r = self.session.get(f"{self.products_url}/{product_id}", timeout=self.timeout)
        return self._check(r).json()

    def create_product(
        self,
        name: str,
        price: Number,
        stock_quantity: int,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = _product_payload(name, price, stock_quantity, description, category)
        r = self.session.post(self.products_url, json=payload, timeout=self.timeout)
        return self._check(r).json()

    def update_product(
        self,
        product_id: int,
        name: str,
        price: Number,
        stock_quantity: int,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> None:
        # PUT replaces every editable field, so callers send the whole record
        payload = _product_payload(name, price, stock_quantity, description, category, product_id)
        r = self.session.put(f"{self.products_url}/{product_id}", json=payload, timeout=self.timeout)
        self._check(r)

    def delete_product(self, product_id: int) -> None:
        r = self.session.delete(f"{self.products_url}/{product_id}", timeout=self.timeout)
        self._check(r)

    def reset(self) -> Dict[str, Any]:
        # only available when the server runs with ENABLE_RESET=true
        r = self.session.post(f"{self.products_url}/reset", timeout=self.timeout)
        return self._check(r).json()

    # Async create (example)
    async def create_product_async(
        self,
        name: str,
        price: Number,
        stock_quantity: int,
        description: Optional[str] = None,
        category: Optional[str] = None,
    ) -> httpx.Response:
        payload = _product_payload(name, price, stock_quantity, description, category)
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self.async_transport, headers=self.headers
        ) as client:
            # callers inspect the status themselves
            return await client.post(self.products_url, json=payload)


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Products API client")
    parser.add_argument("--base-url", default="http://127.0.0.1:8085", help="Server base URL")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("list-products", help="List all products")

    gp = subparsers.add_parser("get-product", help="Get a product by its ID")
    gp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    def _add_fields(p):
        p.add_argument("--name", required=True, help="Product name")
        p.add_argument("--price", required=True, help="Price, e.g. 19.99")
        p.add_argument("--stock", type=int, default=0, help="Stock quantity")
        p.add_argument("--description", help="Product description")
        p.add_argument("--category", help="Product category")

    cp = subparsers.add_parser("create-product", help="Create a product")
    _add_fields(cp)

    up = subparsers.add_parser("update-product", help="Replace a product's fields")
    up.add_argument("--product-id", type=int, required=True, help="ID of the product")
    _add_fields(up)

    dp = subparsers.add_parser("delete-product", help="Delete a product")
    dp.add_argument("--product-id", type=int, required=True, help="ID of the product")

    args = parser.parse_args()
    c = CatalogClient(base_url=args.base_url)

    if args.command == "list-products":
        print(c.list_products())
    elif args.command == "get-product":
        print(c.get_product(args.product_id))
    elif args.command == "create-product":
        print(c.create_product(args.name, Decimal(args.price), args.stock, args.description, args.category))
    elif args.command == "update-product":
        c.update_product(args.product_id, args.name, Decimal(args.price), args.stock, args.description, args.category)
        print(f"[green]Product {args.product_id} updated[/green]")
    elif args.command == "delete-product":
        c.delete_product(args.product_id)
        print(f"[green]Product {args.product_id} deleted[/green]")
