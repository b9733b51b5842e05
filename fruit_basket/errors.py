"""
Error classification for the fruit basket console.

This module provides:
- PromptFailure enum for categorizing rejected answers
- Recoverable prompt errors, handled inside the Console retry loop
- RetryBudgetExhausted, the only fatal condition of a session
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence


class PromptFailure(Enum):
    """
    Classification of a rejected answer.

    Both kinds count against the same retry budget.
    """

    EMPTY_INPUT = auto()        # Blank, whitespace-only or end of input
    TYPE_CONVERSION = auto()    # Answer does not parse as the requested type


class FruitBasketError(Exception):
    """Base exception for fruit basket errors."""


class PromptError(FruitBasketError):
    """
    Base exception for a single rejected answer.

    Recovered locally by the Console; never escapes ``Console.ask``.
    """

    def __init__(self, message: str, failure: PromptFailure) -> None:
        super().__init__(message)
        self.failure = failure


class EmptyInputError(PromptError):
    """Raised when the answer is blank or the input stream is exhausted."""

    def __init__(self) -> None:
        super().__init__(
            "empty response not allowed, try again...",
            failure=PromptFailure.EMPTY_INPUT,
        )


class TypeConversionError(PromptError):
    """Raised when the answer cannot be converted to the requested type."""

    def __init__(self, expected_type: type, raw: str) -> None:
        super().__init__(
            f"the response does not have the expected type: {expected_type.__name__}",
            failure=PromptFailure.TYPE_CONVERSION,
        )
        self.expected_type = expected_type
        self.raw = raw


class RetryBudgetExhausted(FruitBasketError):
    """
    Raised when a single question failed too many times.

    Fatal: the session does not catch it.
    """

    def __init__(
        self,
        attempts: int,
        failures: Optional[Sequence[PromptFailure]] = None,
    ) -> None:
        super().__init__(f"too many failed attempts ({attempts})")
        self.attempts = attempts
        self.failures = list(failures or [])


class UnsupportedTypeError(FruitBasketError, TypeError):
    """Raised when the Console is asked for a type it cannot convert to."""

    def __init__(self, requested: object) -> None:
        name = getattr(requested, "__name__", repr(requested))
        super().__init__(f"unknown type: {name}")
        self.requested = requested


class ConfigError(FruitBasketError):
    """Raised when configuration is invalid or cannot be loaded."""
    pass
