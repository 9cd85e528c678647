"""Models for harness log entries."""

from typing import Any, Literal

from pydantic import Field

from wallet_test_harness.models.base import Model

type LogLevel = Literal["debug", "info", "warn", "error"]


class LogEntry(Model):
    """A single entry in the harness log."""

    timestamp_ms: int = Field(..., serialization_alias="timestampMs")
    level: LogLevel
    message: str
    data: Any = None
