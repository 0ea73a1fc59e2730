"""Public API for the live order board package."""

from .core import (
    InvalidOrderError,
    Order,
    OrderFactory,
    OrderRegistry,
    OrderSummary,
    OrderType,
    validate,
)

__all__ = [
    "InvalidOrderError",
    "Order",
    "OrderFactory",
    "OrderRegistry",
    "OrderSummary",
    "OrderType",
    "validate",
]
