"""
Core data models for the fruit basket.

Item and DiscountRule are immutable catalog entries; the mutable Basket lives
in ``fruit_basket.pricing``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class Item:
    """
    A purchasable kind of fruit.

    Attributes:
        item_id: Kind identifier (e.g., "apple")
        price: Unit price in the smallest currency unit
        labels: Every text the user may type to mean this item
    """
    item_id: str
    price: int
    labels: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate the entry after initialization."""
        if not self.item_id:
            raise ValueError("item_id cannot be empty")
        if not _is_int(self.price):
            raise ValueError(f"price of {self.item_id} must be an integer")
        if self.price <= 0:
            raise ValueError(f"price of {self.item_id} must be positive")
        if not self.labels:
            raise ValueError(f"{self.item_id} needs at least one label")
        # Accept any sequence but store a tuple so the item stays hashable
        object.__setattr__(self, "labels", tuple(self.labels))

    def matches(self, label: str) -> bool:
        """Check whether ``label`` is one of this item's labels (exact match)."""
        return label in self.labels

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Item:
        """
        Create an Item from a dictionary (e.g., from YAML parsing).

        Args:
            data: Mapping with ``id``, ``price`` and ``labels`` keys.

        Returns:
            Item instance.
        """
        labels = data.get("labels") or []
        if isinstance(labels, str):
            labels = [labels]
        return cls(
            item_id=str(data["id"]),
            price=data["price"],
            labels=tuple(str(label) for label in labels),
        )


@dataclass(frozen=True)
class DiscountRule:
    """
    A flat deduction applied once per complete batch of one item kind.

    Attributes:
        item_id: Item kind the rule counts
        batch_size: Number of items forming one batch (>= 1)
        amount: Deduction per complete batch
    """
    item_id: str
    batch_size: int
    amount: int

    def __post_init__(self) -> None:
        if not _is_int(self.batch_size):
            raise ValueError(f"batch_size of the {self.item_id} discount must be an integer")
        if self.batch_size < 1:
            raise ValueError("batch_size must be at least 1")
        if not _is_int(self.amount):
            raise ValueError(f"amount of the {self.item_id} discount must be an integer")

    def batches(self, count: int) -> int:
        """Number of complete batches in ``count`` matching items."""
        return count // self.batch_size

    def deduction(self, count: int) -> int:
        """Total deduction for ``count`` matching items."""
        return self.batches(count) * self.amount

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DiscountRule:
        return cls(
            item_id=str(data["item"]),
            batch_size=data["batch_size"],
            amount=data["amount"],
        )
