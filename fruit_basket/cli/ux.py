"""CLI UX utilities for consistent behavior across commands.

Provides:
- Consistent error formatting
- Semantic exit codes
"""
from __future__ import annotations

from typing import NoReturn, Optional

import typer

# Semantic exit codes
EXIT_USER_ERROR = 1      # Bad config, too many bad answers


def format_error(code: str, message: str, *, hint: Optional[str] = None) -> str:
    """Format error message consistently.

    Standard format:
        Error: [CODE] Message
          Hint: ...
    """
    headline = f"Error: [{code}] {message}"
    return f"{headline}\n  Hint: {hint}" if hint else headline


def exit_with_error(
    code: str,
    message: str,
    *,
    hint: Optional[str] = None,
    exit_code: int = EXIT_USER_ERROR,
) -> NoReturn:
    """Print formatted error to stderr and exit with ``exit_code``."""
    typer.echo(format_error(code, message, hint=hint), err=True)
    raise typer.Exit(exit_code)
