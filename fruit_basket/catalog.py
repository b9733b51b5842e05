"""
Item catalog and the built-in price and discount tables.

The catalog is built once at startup and handed to whoever needs it; nothing
in the package reads it from module state.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from fruit_basket.models import DiscountRule, Item


class Catalog:
    """
    Ordered, read-only set of items.

    Lookup by label is a case-sensitive exact match. When two items share a
    label, the one declared first wins.
    """

    def __init__(self, items: Iterable[Item]) -> None:
        self._items: tuple[Item, ...] = tuple(items)
        self._by_id: dict[str, Item] = {}
        for item in self._items:
            if item.item_id in self._by_id:
                raise ValueError(f"Duplicate item id: {item.item_id}")
            self._by_id[item.item_id] = item

    def resolve(self, label: str) -> Optional[Item]:
        """
        Map free text to a catalog item.

        Args:
            label: Text exactly as typed by the user.

        Returns:
            The first item carrying ``label``, or None if no item does.
        """
        for item in self._items:
            if item.matches(label):
                return item
        return None

    def get(self, item_id: str) -> Item:
        """Get an item by id. Raises KeyError for unknown ids."""
        return self._by_id[item_id]

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._by_id

    def __repr__(self) -> str:
        ids = ", ".join(item.item_id for item in self._items)
        return f"Catalog({ids})"


def default_catalog() -> Catalog:
    """Build the built-in catalog (apples, bananas and cherries)."""
    return Catalog([
        Item("apple", 100, ("apple", "Pommes", "Apples", "Mele")),
        Item("banana", 150, ("banana", "Bananes")),
        Item("cherry", 75, ("cherry", "Cerises")),
    ])


def default_discounts(catalog: Catalog) -> tuple[DiscountRule, ...]:
    """
    Build the built-in discount rules for ``catalog``.

    Two cherries take 20 off; the second banana is free.
    """
    return (
        DiscountRule("cherry", batch_size=2, amount=20),
        DiscountRule("banana", batch_size=2, amount=catalog.get("banana").price),
    )
