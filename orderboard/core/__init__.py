"""Core domain models and the live order registry."""

from .enums import OrderType
from .errors import InvalidOrderError
from .order import Order, OrderSummary
from .order_factory import OrderFactory, validate
from .order_registry import OrderRegistry

__all__ = [
    "OrderType",
    "InvalidOrderError",
    "Order",
    "OrderSummary",
    "OrderFactory",
    "validate",
    "OrderRegistry",
]
