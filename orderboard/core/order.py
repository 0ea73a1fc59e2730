from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict

from .enums import OrderType


@dataclass(frozen=True)
class Order:
    id: int
    user_id: str
    quantity: float
    price: Decimal  # exact, grouped by equality
    order_type: OrderType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "quantity": self.quantity,
            "price": str(self.price),
            "order_type": self.order_type.value,
        }


@dataclass(frozen=True)
class OrderSummary:
    """Total live quantity resting at one price level on one side."""

    quantity: float
    price: Decimal
    order_type: OrderType

    def to_dict(self) -> Dict[str, Any]:
        return {
            "quantity": self.quantity,
            "price": str(self.price),
            "order_type": self.order_type.value,
        }
