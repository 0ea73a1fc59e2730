from __future__ import annotations

from decimal import Decimal
from enum import Enum
from functools import cmp_to_key
from typing import Callable, Dict, Iterable, List


PriceComparator = Callable[[Decimal, Decimal], int]


def _highest_first(price_a: Decimal, price_b: Decimal) -> int:
    return (price_a < price_b) - (price_a > price_b)


def _lowest_first(price_a: Decimal, price_b: Decimal) -> int:
    return (price_a > price_b) - (price_a < price_b)


class OrderType(str, Enum):
    BUY = "BUY"
    SELL = "SELL"

    def compare(self, price_a: Decimal, price_b: Decimal) -> int:
        """Three-way price comparison, negative when price_a ranks first."""
        return _PRICE_COMPARATORS[self](price_a, price_b)

    def sort_prices(self, prices: Iterable[Decimal]) -> List[Decimal]:
        return sorted(prices, key=cmp_to_key(self.compare))


_PRICE_COMPARATORS: Dict[OrderType, PriceComparator] = {
    OrderType.BUY: _highest_first,  # most aggressive buyer first
    OrderType.SELL: _lowest_first,  # most aggressive seller first
}
