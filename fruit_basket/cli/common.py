"""Common utilities and global state for the CLI.

Contains the console singleton and config loading.
This module should NOT import from app.py to avoid circular imports.
"""
from __future__ import annotations

from typing import Optional

from rich.console import Console

from fruit_basket.config import ShopConfig, load_config
from fruit_basket.errors import ConfigError
from fruit_basket.cli.ux import exit_with_error

# ============================================================================
# Global State
# ============================================================================

# Config file override (set via --config flag)
_config_path: Optional[str] = None

# Console singleton
_console: Optional[Console] = None


def get_config_path() -> Optional[str]:
    """Get the config file override if set."""
    return _config_path


def set_config_path(path: Optional[str]) -> None:
    """Set the config file override."""
    global _config_path
    _config_path = path


def get_console() -> Console:
    """Get or create the console singleton."""
    global _console
    if _console is None:
        _console = Console()
    return _console


# ============================================================================
# Config Helpers
# ============================================================================


def load_config_or_exit() -> ShopConfig:
    """
    Load the config named by --config, or the built-in one.

    Prints a formatted error and exits with EXIT_USER_ERROR when the file is
    invalid.
    """
    try:
        return load_config(get_config_path())
    except ConfigError as e:
        exit_with_error(
            "INVALID_CONFIG",
            str(e),
            hint="Fix the file or run without --config to use the built-in catalog",
        )
