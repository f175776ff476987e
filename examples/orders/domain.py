"""Orders domain: value objects compared by content."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Optional

from memberwise import ValueObject, ignore, ignored_field


@dataclass(frozen=True, eq=False)
class Money(ValueObject):
    amount_cents: int
    currency: str


@dataclass(frozen=True, eq=False)
class OrderLine(ValueObject):
    sku: str
    quantity: int
    price: Money


@dataclass(frozen=True, eq=False)
class ShippingAddress(ValueObject):
    street: str
    city: str
    note: Annotated[str, ignore] = ""


@dataclass(frozen=True, eq=False)
class OrderSnapshot(ValueObject):
    customer_id: str
    lines: tuple[OrderLine, ...]
    ship_to: Optional[ShippingAddress]
    captured_at: float = ignored_field(default=0.0)
