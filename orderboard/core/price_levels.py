from __future__ import annotations

from decimal import Decimal
from functools import cmp_to_key
from typing import Dict, Iterable, List, Sequence, Tuple

from .enums import OrderType
from .order import Order, OrderSummary


def aggregate_side(orders: Iterable[Order], order_type: OrderType) -> List[OrderSummary]:
    """Collapse one side of a snapshot into price levels, best price first."""
    levels: Dict[Decimal, float] = {}
    for order in orders:
        if order.order_type is not order_type:
            continue
        levels[order.price] = levels.get(order.price, 0.0) + order.quantity

    summaries = [OrderSummary(quantity=qty, price=px, order_type=order_type) for px, qty in levels.items()]
    summaries.sort(key=cmp_to_key(lambda a, b: order_type.compare(a.price, b.price)))
    return summaries


def summarize(orders: Sequence[Order]) -> List[OrderSummary]:
    """Summaries for every side, BUY group first then SELL.

    ``orders`` should be a single snapshot so both sides describe the same instant.
    """
    result: List[OrderSummary] = []
    for order_type in OrderType:
        result.extend(aggregate_side(orders, order_type))
    return result


def top_levels(summaries: Iterable[OrderSummary], order_type: OrderType, levels: int) -> List[Tuple[Decimal, float]]:
    if levels <= 0:
        raise ValueError("levels must be a positive integer")
    items = [(s.price, s.quantity) for s in summaries if s.order_type is order_type]
    return items[:levels]
