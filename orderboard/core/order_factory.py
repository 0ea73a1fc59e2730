from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional, Union

from .enums import OrderType
from .errors import InvalidOrderError
from .order import Order


PriceLike = Union[Decimal, int, float, str]


def parse_order_type(order_type: Union[str, OrderType, None]) -> Optional[OrderType]:
    if order_type is None or isinstance(order_type, OrderType):
        return order_type
    normalized = str(order_type).strip().upper()
    try:
        return OrderType(normalized)
    except ValueError as exc:
        raise InvalidOrderError(f"Unknown order type: {order_type!r}") from exc


def parse_price(price: Optional[PriceLike]) -> Optional[Decimal]:
    """Convert to an exact Decimal; floats go through str() to avoid binary noise."""
    if price is None:
        return None
    if isinstance(price, bool):
        raise InvalidOrderError(f"Invalid price: {price!r}")
    try:
        value = price if isinstance(price, Decimal) else Decimal(str(price).strip())
    except (InvalidOperation, ValueError) as exc:
        raise InvalidOrderError(f"Invalid price: {price!r}") from exc
    if not value.is_finite():
        raise InvalidOrderError(f"Price must be a finite number: {price!r}")
    return value


def parse_quantity(quantity: Union[float, int, str, None]) -> Optional[float]:
    if quantity is None:
        return None
    if isinstance(quantity, bool):
        raise InvalidOrderError(f"Invalid quantity: {quantity!r}")
    try:
        value = float(quantity)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidOrderError(f"Invalid quantity: {quantity!r}") from exc
    if not math.isfinite(value):
        raise InvalidOrderError(f"Quantity must be a finite number: {quantity!r}")
    return value


def validate(
    user_id: Optional[str],
    quantity: Optional[float],
    price: Optional[Decimal],
    order_type: Optional[OrderType],
) -> None:
    # Only exact zero is rejected for quantity and price; negatives pass.
    # Decimal zero is compared numerically, so Decimal("0.00") is rejected too.
    if not user_id:
        raise InvalidOrderError("User id cannot be null or empty")
    if quantity is None or quantity == 0:
        raise InvalidOrderError("Quantity has to be greater than zero")
    if price is None or price == 0:
        raise InvalidOrderError("Price has to be greater than zero")
    if order_type is None:
        raise InvalidOrderError("Order type required")


class OrderFactory:
    """Coerces loosely typed input into validated Order values."""

    @staticmethod
    def normalize(
        user_id: Optional[str],
        quantity: Union[float, int, str, None],
        price: Optional[PriceLike],
        order_type: Union[str, OrderType, None],
    ) -> Dict[str, Any]:
        """Return validated Order fields (everything except the id)."""
        user_id = None if user_id is None else str(user_id)
        qty = parse_quantity(quantity)
        px = parse_price(price)
        side = parse_order_type(order_type)
        validate(user_id, qty, px, side)
        return {"user_id": user_id, "quantity": qty, "price": px, "order_type": side}

    @staticmethod
    def create(order_id: int, fields: Mapping[str, Any]) -> Order:
        return Order(id=order_id, **fields)

    @staticmethod
    def from_dict(values: Mapping[str, Any]) -> Dict[str, Any]:
        """Map a request payload onto keyword arguments for OrderRegistry.create.

        Expected keys: user_id, quantity, price, order_type. Missing keys
        become None and are rejected by validation.
        """
        user_id = values.get("user_id")
        return {
            "user_id": None if user_id is None else str(user_id),
            "quantity": values.get("quantity"),
            "price": values.get("price"),
            "order_type": values.get("order_type"),
        }
