# products_api/models.py
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Prices stay exact in memory but go over the wire as plain JSON numbers.
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductIn(_CamelModel):
    """Request body for create and update.

    ``id`` is only compared against the path on update; ``createdAt`` is
    accepted so clients can send back what they read, but it is ignored.
    """

    id: int = 0
    name: str
    description: Optional[str] = None
    price: Price = Decimal("0")
    stock_quantity: int = 0
    category: Optional[str] = None
    created_at: Optional[datetime] = None


class Product(_CamelModel):
    id: int
    name: str
    description: Optional[str] = None
    price: Price = Decimal("0")
    stock_quantity: int = 0
    category: Optional[str] = None
    created_at: datetime


class Message(BaseModel):
    message: str


class ValidationMessage(Message):
    errors: List[Dict[str, Any]] = []
