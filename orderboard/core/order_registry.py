from __future__ import annotations

import itertools
import logging
import threading
from collections import defaultdict
from decimal import Decimal
from typing import Callable, DefaultDict, Dict, List, Optional, Tuple, Union

from .enums import OrderType
from .errors import InvalidOrderError
from .order import Order, OrderSummary
from .order_factory import OrderFactory, PriceLike, parse_order_type
from .price_levels import aggregate_side, summarize, top_levels


logger = logging.getLogger(__name__)

Subscriber = Callable[[str, Order], None]


class OrderRegistry:
    """
    Thread-safe registry of live orders for a single instrument.

    - ids come from a counter and are never reused, even after cancel
    - one lock guards the store and the counter; reads copy a snapshot
      under the lock and aggregate outside it
    - orders are frozen, so a snapshot never holds a torn order
    """

    def __init__(self, first_id: int = 1) -> None:
        self._orders: Dict[int, Order] = {}
        self._ids = itertools.count(first_id)
        self._lock = threading.Lock()
        self._subscribers: DefaultDict[str, List[Subscriber]] = defaultdict(list)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def subscribe(self, event: str, handler: Subscriber) -> None:
        self._subscribers[event].append(handler)

    def unsubscribe(self, event: str, handler: Subscriber) -> None:
        handlers = self._subscribers.get(event)
        if not handlers:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def _notify(self, event: str, order: Order) -> None:
        for handler in list(self._subscribers.get(event, [])):
            try:
                handler(event, order)
            except Exception:
                logger.exception("Subscriber %r failed on %s for order %s", handler, event, order.id)

    def create(
        self,
        user_id: Optional[str],
        quantity: Union[float, int, str, None],
        price: Optional[PriceLike],
        order_type: Union[str, OrderType, None],
    ) -> int:
        try:
            fields = OrderFactory.normalize(user_id, quantity, price, order_type)
        except InvalidOrderError as exc:
            logger.info("Rejected order from user %r: %s", user_id, exc)
            raise

        with self._lock:
            order_id = next(self._ids)
        order = OrderFactory.create(order_id, fields)
        with self._lock:
            self._orders[order_id] = order

        logger.debug("Created order %s", order)
        self._notify("order_created", order)
        return order_id

    def cancel(self, order_id: int) -> Optional[Order]:
        with self._lock:
            order = self._orders.pop(order_id, None)
        if order is None:
            logger.debug("Cancel of unknown order id %s ignored", order_id)
            return None
        logger.debug("Cancelled order %s", order)
        self._notify("order_cancelled", order)
        return order

    def get_order(self, order_id: int) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def list_all_orders(self) -> Tuple[Order, ...]:
        with self._lock:
            return tuple(self._orders.values())

    def live_order_summaries(self) -> List[OrderSummary]:
        return summarize(self.list_all_orders())

    def summaries_for(self, order_type: Union[str, OrderType]) -> List[OrderSummary]:
        side = parse_order_type(order_type)
        if side is None:
            raise ValueError("order_type is required")
        return aggregate_side(self.list_all_orders(), side)

    # --- Depth snapshot for display ---
    def depth(self, levels: int = 5) -> Dict[str, List[Tuple[Decimal, float]]]:
        """Return the top N levels per side as (price, total_quantity)."""
        summaries = self.live_order_summaries()
        return {
            "bids": top_levels(summaries, OrderType.BUY, levels),
            "asks": top_levels(summaries, OrderType.SELL, levels),
        }
