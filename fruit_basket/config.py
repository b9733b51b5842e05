"""
Configuration loading and validation for the fruit basket.

This module handles:
- Built-in defaults (catalog, discounts, retry budget)
- Loading an optional YAML file
- Environment variable resolution (${VAR} syntax) in logs_dir
- Validation of every entry
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from fruit_basket.catalog import Catalog, default_catalog, default_discounts
from fruit_basket.errors import ConfigError
from fruit_basket.models import DiscountRule, Item

DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class ShopConfig:
    """
    Everything a session needs, built once at startup.

    This is the top-level config, either built-in or loaded from YAML.
    """
    catalog: Catalog = field(default_factory=default_catalog)
    discounts: tuple[DiscountRule, ...] = ()
    max_attempts: int = DEFAULT_MAX_ATTEMPTS     # Failed answers allowed per question
    logs_dir: Optional[Path] = None              # JSONL session logs; None disables

    def __post_init__(self) -> None:
        object.__setattr__(self, "discounts", tuple(self.discounts))
        if self.max_attempts < 1:
            raise ConfigError("max_attempts must be at least 1")
        for rule in self.discounts:
            if rule.item_id not in self.catalog:
                raise ConfigError(f"Discount references unknown item: {rule.item_id}")


def default_config() -> ShopConfig:
    """Build the configuration used when no file is given."""
    catalog = default_catalog()
    return ShopConfig(catalog=catalog, discounts=default_discounts(catalog))


def _resolve_env_vars(value: Any) -> Any:
    """
    Resolve ${VAR} references in a string value.

    Raises:
        ConfigError: If a referenced variable is not set.
    """
    if not isinstance(value, str):
        return value

    pattern = re.compile(r"\$\{([^}]+)\}")

    def replace(match: re.Match) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name)
        if env_value is None:
            raise ConfigError(f"Environment variable ${{{var_name}}} is not set")
        return env_value

    return pattern.sub(replace, value)


def _parse_catalog(data: Any) -> Catalog:
    if not isinstance(data, list) or not data:
        raise ConfigError("catalog must be a non-empty list of items")

    items = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid catalog entry: {entry!r}")
        if "id" not in entry or "price" not in entry:
            raise ConfigError(f"Catalog entry needs id and price: {entry!r}")
        try:
            items.append(Item.from_dict(entry))
        except ValueError as e:
            raise ConfigError(f"Invalid catalog entry: {e}") from e

    try:
        return Catalog(items)
    except ValueError as e:
        raise ConfigError(str(e)) from e


def _parse_discounts(data: Any) -> tuple[DiscountRule, ...]:
    if data is None:
        return ()
    if not isinstance(data, list):
        raise ConfigError("discounts must be a list")

    rules = []
    for entry in data:
        if not isinstance(entry, dict):
            raise ConfigError(f"Invalid discount entry: {entry!r}")
        try:
            rules.append(DiscountRule.from_dict(entry))
        except KeyError as e:
            raise ConfigError(f"Discount entry is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid discount entry: {e}") from e
    return tuple(rules)


def load_config(config_path: Optional[str] = None) -> ShopConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML file. If None, returns the built-in
                     defaults.

    Returns:
        ShopConfig instance.

    Raises:
        ConfigError: If the file is missing, malformed or invalid.
    """
    if config_path is None:
        return default_config()

    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(path, "r") as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file: {e}")

    if raw_data is None:
        raise ConfigError("Configuration file is empty")
    if not isinstance(raw_data, dict):
        raise ConfigError("Configuration file must contain a mapping")

    if "catalog" in raw_data:
        catalog = _parse_catalog(raw_data["catalog"])
        discounts = _parse_discounts(raw_data.get("discounts"))
    else:
        catalog = default_catalog()
        if "discounts" in raw_data:
            discounts = _parse_discounts(raw_data["discounts"])
        else:
            discounts = default_discounts(catalog)

    max_attempts = raw_data.get("max_attempts", DEFAULT_MAX_ATTEMPTS)
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int):
        raise ConfigError("max_attempts must be an integer")

    logs_dir = raw_data.get("logs_dir")
    if logs_dir is not None:
        logs_dir = Path(_resolve_env_vars(str(logs_dir)))

    return ShopConfig(
        catalog=catalog,
        discounts=discounts,
        max_attempts=max_attempts,
        logs_dir=logs_dir,
    )
