# tests/conftest.py

import io

import pytest
from typer.testing import CliRunner

from fruit_basket.catalog import Catalog, default_catalog, default_discounts
from fruit_basket.config import ShopConfig, default_config
from fruit_basket.console import Console
from fruit_basket.models import DiscountRule, Item


@pytest.fixture
def shop_config():
    """Built-in catalog and discounts."""
    return default_config()


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def discounts(catalog):
    return default_discounts(catalog)


@pytest.fixture
def tiny_config():
    """Single-item shop whose discount is larger than the item price."""
    catalog = Catalog([Item("plum", 10, ("plum",))])
    return ShopConfig(
        catalog=catalog,
        discounts=(DiscountRule("plum", batch_size=1, amount=25),),
    )


@pytest.fixture
def make_console():
    """Build a Console reading ``text`` and writing to a StringIO.

    Returns (console, output) where ``output`` stays readable after the
    console is closed.
    """
    def _make(text: str = "", max_attempts: int = 3):
        reader = io.StringIO(text)
        writer = io.StringIO()
        console = Console(reader, writer, max_attempts=max_attempts, close_streams=False)
        return console, writer

    return _make


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_config(tmp_path):
    """Write YAML text to a config file and return its path."""
    def _write(text: str, name: str = "basket.yaml") -> str:
        path = tmp_path / name
        path.write_text(text)
        return str(path)

    return _write
