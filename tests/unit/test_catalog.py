"""Tests for catalog entries and label lookup."""

from dataclasses import FrozenInstanceError

import pytest

from fruit_basket.catalog import Catalog
from fruit_basket.models import DiscountRule, Item


class TestItem:
    """Tests for the Item dataclass."""

    def test_labels_stored_as_tuple(self):
        item = Item("apple", 100, ["apple", "Pommes"])

        assert item.labels == ("apple", "Pommes")
        assert hash(item)

    def test_item_is_immutable(self):
        item = Item("apple", 100, ("apple",))

        with pytest.raises(FrozenInstanceError):
            item.price = 1

    @pytest.mark.parametrize("price", [0, -5])
    def test_price_must_be_positive(self, price):
        with pytest.raises(ValueError, match="positive"):
            Item("apple", price, ("apple",))

    def test_price_must_be_integer(self):
        with pytest.raises(ValueError, match="integer"):
            Item("apple", 1.5, ("apple",))

    def test_needs_a_label(self):
        with pytest.raises(ValueError, match="label"):
            Item("apple", 100, ())

    def test_from_dict(self):
        item = Item.from_dict({"id": "kiwi", "price": 30, "labels": ["kiwi", "Kiwis"]})

        assert item == Item("kiwi", 30, ("kiwi", "Kiwis"))

    def test_from_dict_single_label_string(self):
        item = Item.from_dict({"id": "kiwi", "price": 30, "labels": "kiwi"})

        assert item.labels == ("kiwi",)


class TestDiscountRule:
    """Tests for the DiscountRule dataclass."""

    def test_batch_size_at_least_one(self):
        with pytest.raises(ValueError):
            DiscountRule("cherry", batch_size=0, amount=20)

    @pytest.mark.parametrize(
        "batch_size,amount",
        [(2.9, 20), ("2", 20), (True, 20), (2, 20.9), (2, "20"), (2, False)],
    )
    def test_non_integer_values_rejected(self, batch_size, amount):
        with pytest.raises(ValueError, match="must be an integer"):
            DiscountRule("cherry", batch_size=batch_size, amount=amount)

    @pytest.mark.parametrize("count,batches", [(0, 0), (1, 0), (2, 1), (3, 1), (4, 2)])
    def test_batches_use_floor_division(self, count, batches):
        rule = DiscountRule("cherry", batch_size=2, amount=20)

        assert rule.batches(count) == batches
        assert rule.deduction(count) == batches * 20

    def test_from_dict(self):
        rule = DiscountRule.from_dict({"item": "cherry", "batch_size": 2, "amount": 20})

        assert rule == DiscountRule("cherry", 2, 20)


class TestCatalogResolve:
    """Label lookup is exact and case-sensitive."""

    @pytest.mark.parametrize(
        "label,item_id",
        [
            ("apple", "apple"),
            ("Pommes", "apple"),
            ("Apples", "apple"),
            ("Mele", "apple"),
            ("banana", "banana"),
            ("Bananes", "banana"),
            ("cherry", "cherry"),
            ("Cerises", "cherry"),
        ],
    )
    def test_every_label_resolves(self, catalog, label, item_id):
        assert catalog.resolve(label).item_id == item_id

    @pytest.mark.parametrize("label", ["grape", "Apple", "POMMES", " apple", "apple ", ""])
    def test_unknown_or_non_exact_labels(self, catalog, label):
        assert catalog.resolve(label) is None

    def test_first_declared_item_wins_shared_label(self):
        catalog = Catalog([
            Item("red", 1, ("fruit", "red")),
            Item("green", 2, ("fruit", "green")),
        ])

        assert catalog.resolve("fruit").item_id == "red"
        assert catalog.resolve("green").item_id == "green"


class TestCatalogContainer:
    """Container behaviour of the catalog."""

    def test_order_is_preserved(self, catalog):
        assert [item.item_id for item in catalog] == ["apple", "banana", "cherry"]
        assert len(catalog) == 3

    def test_contains_item_ids(self, catalog):
        assert "banana" in catalog
        assert "Bananes" not in catalog

    def test_get_by_id(self, catalog):
        assert catalog.get("cherry").price == 75

    def test_get_unknown_id_raises(self, catalog):
        with pytest.raises(KeyError):
            catalog.get("grape")

    def test_duplicate_ids_rejected(self):
        with pytest.raises(ValueError, match="Duplicate"):
            Catalog([Item("apple", 1, ("a",)), Item("apple", 2, ("b",))])

    def test_default_prices(self, catalog):
        assert {item.item_id: item.price for item in catalog} == {
            "apple": 100,
            "banana": 150,
            "cherry": 75,
        }

    def test_default_discounts(self, discounts):
        assert discounts == (
            DiscountRule("cherry", 2, 20),
            DiscountRule("banana", 2, 150),
        )
