"""Basket and total price computation."""

from __future__ import annotations

from typing import Iterable, Iterator, Sequence

from fruit_basket.models import DiscountRule, Item


def compute_total(items: Iterable[Item], discounts: Sequence[DiscountRule]) -> int:
    """
    Compute the total price of ``items`` after discounts.

    Each rule counts matching items in the full list, so rules never consume
    items from one another. The result is not clamped and may be negative.

    Args:
        items: Items in the basket.
        discounts: Rules, applied in order.

    Returns:
        Total in the smallest currency unit.
    """
    items = list(items)
    total = sum(item.price for item in items)
    for rule in discounts:
        count = sum(1 for item in items if item.item_id == rule.item_id)
        total -= rule.deduction(count)
    return total


class Basket:
    """Append-only, ordered list of the items chosen during a session."""

    def __init__(self) -> None:
        self._items: list[Item] = []

    def add(self, item: Item) -> None:
        self._items.append(item)

    def count(self, item_id: str) -> int:
        """Number of items of kind ``item_id`` in the basket."""
        return sum(1 for item in self._items if item.item_id == item_id)

    def raw_total(self) -> int:
        """Sum of unit prices, before discounts."""
        return sum(item.price for item in self._items)

    def price(self, discounts: Sequence[DiscountRule]) -> int:
        """Current total with ``discounts`` applied, recomputed from scratch."""
        return compute_total(self._items, discounts)

    @property
    def items(self) -> tuple[Item, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)
