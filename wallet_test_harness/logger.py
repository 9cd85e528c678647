"""In-memory leveled log for harness runs."""

import json
import logging
import time
from collections.abc import Callable, Mapping
from typing import Any, cast

from pydantic_core import to_jsonable_python

from wallet_test_harness.models.log import LogEntry, LogLevel

CONSOLE_LOGGER_NAME = "wallet_test_harness.session_log"

LEVEL_ORDER: Mapping[LogLevel, int] = {
    "debug": 0,
    "info": 1,
    "warn": 2,
    "error": 3,
}

STDLIB_LEVELS: Mapping[LogLevel, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


def _check_level(level: str) -> LogLevel:
    if level not in LEVEL_ORDER:
        raise ValueError(
            f"Unknown log level '{level}'. Expected one of: {', '.join(LEVEL_ORDER)}"
        )
    return cast(LogLevel, level)


class TestLogger:
    """Append-only log that keeps every entry and echoes some to the console.

    Entries are stored regardless of level, in the order they were written.
    Entries at or above ``min_level`` are also forwarded to the standard
    library logger named ``wallet_test_harness.session_log``; forwarding has
    no effect on what is stored or exported.
    """

    __test__ = False

    def __init__(
        self,
        min_level: LogLevel = "info",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.min_level = _check_level(min_level)
        self._clock = clock
        self._entries: list[LogEntry] = []
        self._console = logging.getLogger(CONSOLE_LOGGER_NAME)

    @property
    def entries(self) -> tuple[LogEntry, ...]:
        """Snapshot of the stored entries in emission order."""
        return tuple(self._entries)

    def write(self, level: LogLevel, message: str, data: Any = None) -> LogEntry:
        """Append an entry and forward it to the console when enabled."""
        level = _check_level(level)
        entry = LogEntry(
            timestamp_ms=int(self._clock() * 1000),
            level=level,
            message=message,
            data=to_jsonable_python(data, fallback=str),
        )
        self._entries.append(entry)

        if LEVEL_ORDER[level] >= LEVEL_ORDER[self.min_level]:
            if data is None:
                self._console.log(STDLIB_LEVELS[level], "%s", message)
            else:
                self._console.log(STDLIB_LEVELS[level], "%s %s", message, entry.data)

        return entry

    def debug(self, message: str, data: Any = None) -> LogEntry:
        """Write a debug entry."""
        return self.write("debug", message, data)

    def info(self, message: str, data: Any = None) -> LogEntry:
        """Write an info entry."""
        return self.write("info", message, data)

    def warn(self, message: str, data: Any = None) -> LogEntry:
        """Write a warning entry."""
        return self.write("warn", message, data)

    def error(self, message: str, data: Any = None) -> LogEntry:
        """Write an error entry."""
        return self.write("error", message, data)

    def export(self) -> str:
        """Serialize all entries to a JSON document."""
        return json.dumps(
            [entry.model_dump(mode="json", by_alias=True) for entry in self._entries],
            indent=2,
        )

    def clear(self) -> None:
        """Drop all entries. The minimum console level is kept."""
        self._entries.clear()
