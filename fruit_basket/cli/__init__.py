"""CLI package for fruit-basket.

Modules:
    app.py      - Main Typer app, version callback, session and catalog commands
    display.py  - Rich tables for the catalog and discount rules
    common.py   - Shared helpers (get_console, load_config_or_exit)
    ux.py       - Error formatting and exit codes

Usage:
    from fruit_basket.cli import app, cli_main  # Main exports
    from fruit_basket.cli.display import catalog_table
"""
from fruit_basket.cli.app import app, cli_main

__all__ = ["app", "cli_main"]
