# products_api/database.py
from datetime import datetime, timedelta
from decimal import Decimal
from typing import List

from .models import Product

# Sample rows the catalog starts with. Nothing is persisted: every new
# CatalogService gets a fresh copy stamped relative to its own clock.


def seed_products(now: datetime) -> List[Product]:
    return [
        Product(
            id=1,
            name="Laptop",
            description="High-performance laptop for developers",
            price=Decimal("1299.99"),
            stock_quantity=15,
            category="Electronics",
            created_at=now - timedelta(days=30),
        ),
        Product(
            id=2,
            name="Wireless Mouse",
            description="Ergonomic wireless mouse with precision tracking",
            price=Decimal("29.99"),
            stock_quantity=50,
            category="Accessories",
            created_at=now - timedelta(days=15),
        ),
        Product(
            id=3,
            name="Mechanical Keyboard",
            description="RGB mechanical keyboard with brown switches",
            price=Decimal("149.99"),
            stock_quantity=25,
            category="Accessories",
            created_at=now - timedelta(days=7),
        ),
    ]
