# products_api/core.py
"""
Catalog service: the in-memory product collection and its five operations.

The service owns its list of products and a single lock. Every operation
takes the lock for its whole duration, so a create can never compute the
same next id as a concurrent create, and readers never see a half-applied
update. Callers always receive copies; the stored records are only ever
changed through ``update_product``.
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Iterable, List, Optional

from .database import seed_products
from .models import Product, ProductIn

logger = logging.getLogger(__name__)

PRODUCT_REQUIRED = "Product data is required"
ID_MISMATCH = "Product ID mismatch or invalid data"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class CatalogError(Exception):
    """Base class for errors the catalog reports back to callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidProductError(CatalogError):
    status_code = 400


class ProductNotFoundError(CatalogError):
    status_code = 404

    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found")
        self.product_id = product_id


class CatalogService:
    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        seed: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._clock = clock or _utcnow
        self._lock = threading.Lock()
        self._products: List[Product] = []
        if products is not None:
            self._products = [p.model_copy() for p in products]
        elif seed:
            self._products = seed_products(self._clock())

    def _find(self, product_id: int) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def _next_id(self) -> int:
        # max+1 rather than a counter: ids freed at the top end get reused
        if not self._products:
            return 1
        return max(p.id for p in self._products) + 1

    def list_products(self) -> List[Product]:
        with self._lock:
            return [p.model_copy() for p in self._products]

    def get_product(self, product_id: int) -> Product:
        with self._lock:
            product = self._find(product_id)
            if product is None:
                raise ProductNotFoundError(product_id)
            return product.model_copy()

    def create_product(self, candidate: Optional[ProductIn]) -> Product:
        if candidate is None:
            logger.debug("rejected create: empty body")
            raise InvalidProductError(PRODUCT_REQUIRED)

        with self._lock:
            product = Product(
                id=self._next_id(),
                name=candidate.name,
                description=candidate.description,
                price=candidate.price,
                stock_quantity=candidate.stock_quantity,
                category=candidate.category,
                created_at=self._clock(),
            )
            self._products.append(product)
            logger.info("created product %s (%s)", product.id, product.name)
            return product.model_copy()

    def update_product(self, product_id: int, candidate: Optional[ProductIn]) -> None:
        if candidate is None or candidate.id != product_id:
            logger.debug("rejected update of product %s: id mismatch or empty body", product_id)
            raise InvalidProductError(ID_MISMATCH)

        with self._lock:
            existing = self._find(product_id)
            if existing is None:
                raise ProductNotFoundError(product_id)

            existing.name = candidate.name
            existing.description = candidate.description
            existing.price = candidate.price
            existing.stock_quantity = candidate.stock_quantity
            existing.category = candidate.category
            logger.info("updated product %s", product_id)

    def delete_product(self, product_id: int) -> None:
        with self._lock:
            existing = self._find(product_id)
            if existing is None:
                raise ProductNotFoundError(product_id)
            self._products.remove(existing)
            logger.info("deleted product %s", product_id)

    def reset(self, seed: bool = True) -> None:
        with self._lock:
            self._products = seed_products(self._clock()) if seed else []
            logger.info("catalog reset (seeded=%s)", seed)

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)
