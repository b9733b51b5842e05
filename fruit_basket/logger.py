"""
JSONL event log for basket sessions.

One file per UTC day, ``<logs_dir>/session-YYYY-MM-DD.jsonl``, one JSON
object per line::

    {"timestamp": "...Z", "level": "info", "event_type": "item_added",
     "data": {"item": "apple"}, "session_id": "a1b2c3"}

``session_id`` is only present for entries written inside
``SessionLogger.session_context``. A logger without a directory is
disabled: it writes nothing and reads back nothing.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from datetime import datetime, timezone
from enum import Enum
from functools import partialmethod
from itertools import islice
from pathlib import Path
from typing import Any, Iterator, Optional, Union


class LogLevel(str, Enum):
    """Severity recorded with each entry."""
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class SessionLogger:
    """Append-only JSONL event log with per-session tagging."""

    FILE_PREFIX = "session-"

    def __init__(self, logs_dir: Optional[Union[str, Path]] = None) -> None:
        self.logs_dir = Path(logs_dir) if logs_dir is not None else None
        self._session_id: Optional[str] = None

    @property
    def enabled(self) -> bool:
        return self.logs_dir is not None

    def log_file(self, date: Optional[str] = None) -> Optional[Path]:
        """Path of the file for ``date`` (YYYY-MM-DD, today by default), None when disabled."""
        if self.logs_dir is None:
            return None
        day = date or _utc_now().strftime("%Y-%m-%d")
        return self.logs_dir / f"{self.FILE_PREFIX}{day}.jsonl"

    def log(
        self,
        event_type: str,
        data: Optional[dict[str, Any]] = None,
        level: Union[LogLevel, str] = LogLevel.INFO,
    ) -> None:
        """Append one event; a no-op when the logger is disabled."""
        path = self.log_file()
        if path is None:
            return

        entry: dict[str, Any] = {
            "timestamp": _utc_now().isoformat().replace("+00:00", "Z"),
            "level": LogLevel(level).value,
            "event_type": event_type,
            "data": data or {},
        }
        if self._session_id:
            entry["session_id"] = self._session_id

        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, default=str) + "\n")

    debug = partialmethod(log, level=LogLevel.DEBUG)
    info = partialmethod(log, level=LogLevel.INFO)
    warn = partialmethod(log, level=LogLevel.WARN)
    error = partialmethod(log, level=LogLevel.ERROR)

    @contextmanager
    def session_context(self, session_id: str) -> Iterator[SessionLogger]:
        """
        Tag every entry written in the block with ``session_id``.

        ``session_start`` is written on entry and ``session_end`` on exit,
        including when the block raises.
        """
        outer = self._session_id
        self._session_id = session_id
        self.info("session_start", {"session_id": session_id})
        try:
            yield self
        finally:
            self.info("session_end", {"session_id": session_id})
            self._session_id = outer

    def _entries(self, path: Path) -> Iterator[dict[str, Any]]:
        with path.open(encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                try:
                    yield json.loads(line)
                except json.JSONDecodeError:
                    continue

    def read_logs(
        self,
        date: Optional[str] = None,
        level: Optional[str] = None,
        event_type: Optional[str] = None,
        session_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> list[dict[str, Any]]:
        """
        Read back the entries of one day, oldest first.

        ``level``, ``event_type`` and ``session_id`` keep only entries with
        that exact value; ``limit`` caps how many are returned.
        Unparseable lines are skipped.
        """
        path = self.log_file(date)
        if path is None or not path.exists():
            return []

        wanted = {
            key: value
            for key, value in (
                ("level", level),
                ("event_type", event_type),
                ("session_id", session_id),
            )
            if value
        }
        matching = (
            entry
            for entry in self._entries(path)
            if all(entry.get(key) == value for key, value in wanted.items())
        )
        return list(islice(matching, limit or None))
