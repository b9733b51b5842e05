"""
Line-oriented console for the fruit basket session.

The Console owns one input/output stream pair. Every question is written with
a trailing ``? `` marker and flushed before the read, blank answers and
answers of the wrong type are rejected with a message, and a question that
keeps failing raises RetryBudgetExhausted.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Optional, TextIO

from fruit_basket.config import DEFAULT_MAX_ATTEMPTS
from fruit_basket.errors import (
    EmptyInputError,
    PromptError,
    PromptFailure,
    RetryBudgetExhausted,
    TypeConversionError,
    UnsupportedTypeError,
)

logger = logging.getLogger(__name__)

PROMPT_SUFFIX = "? "
RETRY_NOTICE = "try again..."

_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_decimal(text: str) -> int:
    """
    Parse a plain decimal integer.

    Stricter than ``int()``: no surrounding whitespace, no ``_`` digit
    separators, ASCII digits only.

    Raises:
        ValueError: If ``text`` is not an optional sign followed by digits.
    """
    if not _DECIMAL_PATTERN.fullmatch(text):
        raise ValueError(f"not a decimal integer: {text!r}")
    return int(text)


# Converters for the answer types the console knows about
_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: parse_decimal,
}


class Console:
    """
    Manage the input and output of an interactive session.

    Use as a context manager so the streams are released on every exit
    path, including a RetryBudgetExhausted abort:

        with Console(sys.stdin, sys.stdout, close_streams=False) as console:
            name = console.ask_text("name")
            age = console.ask(int, "age")
    """

    def __init__(
        self,
        reader: TextIO,
        writer: TextIO,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        close_streams: bool = True,
    ) -> None:
        """
        Initialize the console.

        Args:
            reader: Stream answers are read from, one line per attempt.
            writer: Stream prompts and messages are written to.
            max_attempts: Failed answers allowed per question.
            close_streams: Close both streams on exit. Pass False for
                process stdio, which is only flushed.
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.reader = reader
        self.writer = writer
        self.max_attempts = max_attempts
        self.close_streams = close_streams
        self._closed = False

    def __enter__(self) -> Console:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Flush output and release the streams. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        try:
            if not self.writer.closed:
                self.writer.flush()
        finally:
            if self.close_streams:
                try:
                    self.reader.close()
                finally:
                    self.writer.close()

    def write(self, text: str) -> None:
        self.writer.write(text)
        self.writer.flush()

    def write_line(self, line: str) -> None:
        """Write one line and flush."""
        self.write(f"{line}\n")

    def wait_for_enter(self, message: str) -> None:
        """Show ``message`` and block until the user submits a line."""
        self.write_line(message)
        self.reader.readline()

    def ask_text(self, question: Optional[str] = None) -> str:
        """Ask for a non-empty line of text."""
        return self.ask(str, question)

    def ask(self, response_type: Any = str, question: Optional[str] = None) -> Any:
        """
        Ask a question until a usable answer arrives.

        Blank answers and answers that do not convert to ``response_type``
        share one budget of ``max_attempts`` failures.

        Args:
            response_type: ``str`` (raw line) or ``int``.
            question: Optional label written before the ``? `` marker.

        Returns:
            The converted answer.

        Raises:
            UnsupportedTypeError: If ``response_type`` has no converter.
            RetryBudgetExhausted: On the last allowed failure.
        """
        converter = _CONVERTERS.get(response_type)
        if converter is None:
            raise UnsupportedTypeError(response_type)

        prompt = PROMPT_SUFFIX if question is None else f"{question} {PROMPT_SUFFIX}"
        failures: list[PromptFailure] = []

        for attempt in range(1, self.max_attempts + 1):
            self.write(prompt)
            response = self._read_response()
            try:
                return self._convert(response_type, converter, response)
            except PromptError as e:
                failures.append(e.failure)
                logger.debug(
                    "Rejected answer %d/%d: %s", attempt, self.max_attempts, e.failure.name
                )
                self.write_line(str(e))
                if isinstance(e, TypeConversionError):
                    self.write_line(RETRY_NOTICE)

        raise RetryBudgetExhausted(self.max_attempts, failures)

    def _read_response(self) -> Optional[str]:
        """Read one line without its terminator; None at end of input."""
        line = self.reader.readline()
        if line == "":
            return None
        if line.endswith("\r\n"):
            return line[:-2]
        if line.endswith("\n") or line.endswith("\r"):
            return line[:-1]
        return line

    @staticmethod
    def _convert(
        response_type: type,
        converter: Callable[[str], Any],
        response: Optional[str],
    ) -> Any:
        if response is None or response.strip() == "":
            raise EmptyInputError()
        try:
            return converter(response)
        except ValueError as e:
            raise TypeConversionError(response_type, response) from e
