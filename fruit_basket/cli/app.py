"""Main Typer app definition and routing.

This is the canonical entry point for the CLI. Running ``fruit-basket``
without a sub-command starts a basket session on stdin/stdout.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from fruit_basket import __version__
from fruit_basket.cli.common import get_console, load_config_or_exit, set_config_path
from fruit_basket.cli.display import catalog_table, discounts_table
from fruit_basket.cli.ux import exit_with_error
from fruit_basket.console import Console
from fruit_basket.errors import RetryBudgetExhausted
from fruit_basket.logger import SessionLogger
from fruit_basket.session import Session

PAUSE_MESSAGE = "press enter to start"

# Create Typer app
app = typer.Typer(
    name="fruit-basket",
    help="Type fruit names, get the running basket total",
    add_completion=False,
)

# Rich console for output - use singleton from common module
console = get_console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fruit-basket version {__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            stream=sys.stderr,
        )


def _run_session(pause: bool = False) -> None:
    """Run one session on process stdio until the retry budget runs out."""
    config = load_config_or_exit()
    event_log = SessionLogger(config.logs_dir)

    try:
        with Console(
            sys.stdin,
            sys.stdout,
            max_attempts=config.max_attempts,
            close_streams=False,
        ) as prompter:
            if pause:
                prompter.wait_for_enter(PAUSE_MESSAGE)
            Session(prompter, config, event_log).run()
    except RetryBudgetExhausted as e:
        exit_with_error(
            "RETRY_BUDGET_EXHAUSTED",
            str(e),
            hint="Answer with a fruit name; end of input counts as an empty answer",
        )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML file with catalog, discounts and retry budget (default: built-in)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log debug details to stderr",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """
    Fruit basket - running total of a fruit basket with batch discounts.

    Without a sub-command, starts an interactive session: type one fruit
    per line and the new total is printed after each one.
    """
    _configure_logging(verbose)
    set_config_path(config)

    if ctx.invoked_subcommand is None:
        _run_session()


@app.command()
def run(
    pause: bool = typer.Option(
        False,
        "--pause",
        help="Wait for Enter before the first question",
    ),
) -> None:
    """Start an interactive basket session."""
    _run_session(pause=pause)


@app.command()
def catalog() -> None:
    """Show the items and discount rules in effect."""
    config = load_config_or_exit()
    console.print(catalog_table(config))
    if config.discounts:
        console.print(discounts_table(config))
    else:
        console.print("[dim]No discounts[/dim]")


# =========================================================================
# Entry Point
# =========================================================================


def cli_main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "cli_main"]
