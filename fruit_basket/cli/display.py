"""Display helpers and formatters for the CLI.

Contains Rich tables for the catalog and the discount rules.
This module should NOT import from app.py to avoid circular imports.
"""
from __future__ import annotations

from rich.table import Table
from rich.text import Text

from fruit_basket.config import ShopConfig
from fruit_basket.models import DiscountRule


def format_price(amount: int) -> Text:
    """Format an amount in the smallest currency unit, red when negative."""
    return Text(str(amount), style="red" if amount < 0 else "green")


def format_discount(rule: DiscountRule) -> str:
    """Describe a rule, e.g. "-20 per 2"."""
    return f"-{rule.amount} per {rule.batch_size}"


def catalog_table(config: ShopConfig) -> Table:
    """Build a table of every item with its price and labels."""
    table = Table(title="Catalog")
    table.add_column("Item", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Labels")

    for item in config.catalog:
        table.add_row(item.item_id, format_price(item.price), ", ".join(item.labels))

    return table


def discounts_table(config: ShopConfig) -> Table:
    """Build a table of the discount rules, in the order they apply."""
    table = Table(title="Discounts")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Item", style="cyan")
    table.add_column("Batch", justify="right")
    table.add_column("Deduction", justify="right")

    for index, rule in enumerate(config.discounts, start=1):
        table.add_row(str(index), rule.item_id, str(rule.batch_size), format_discount(rule))

    return table
