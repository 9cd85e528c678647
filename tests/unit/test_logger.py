"""Tests for the in-memory test logger."""

import json
import logging
from collections.abc import Callable
from itertools import count

import pytest

from wallet_test_harness.logger import CONSOLE_LOGGER_NAME, TestLogger
from wallet_test_harness.models.result import TestSuiteSummary


@pytest.fixture
def clock() -> Callable[[], float]:
    """Clock advancing one second per reading."""
    readings = count(1700000000.0)
    return lambda: next(readings)


def test_export_preserves_write_order(clock: Callable[[], float]) -> None:
    """Exported entries follow the order of write calls."""
    logger = TestLogger(min_level="error", clock=clock)

    logger.info("first")
    logger.debug("second", {"step": 2})
    logger.error("third")
    logger.warn("fourth")

    exported = json.loads(logger.export())

    assert [e["message"] for e in exported] == ["first", "second", "third", "fourth"]
    assert exported[0] == {
        "timestampMs": 1700000000000,
        "level": "info",
        "message": "first",
        "data": None,
    }
    assert exported[1]["data"] == {"step": 2}


def test_clear_empties_log() -> None:
    """Export after clear is an empty list."""
    logger = TestLogger()
    logger.info("entry")

    logger.clear()

    assert json.loads(logger.export()) == []
    assert logger.entries == ()


def test_clear_keeps_min_level() -> None:
    """Clearing does not reset the console threshold."""
    logger = TestLogger(min_level="warn")

    logger.clear()

    assert logger.min_level == "warn"


def test_stores_entries_below_threshold(caplog: pytest.LogCaptureFixture) -> None:
    """Entries below the threshold are stored but not echoed."""
    logger = TestLogger(min_level="warn")

    with caplog.at_level(logging.DEBUG, logger=CONSOLE_LOGGER_NAME):
        logger.info("quiet")
        logger.error("loud")

    assert [e.message for e in logger.entries] == ["quiet", "loud"]
    assert "quiet" not in caplog.text
    assert "loud" in caplog.text


def test_echo_uses_matching_stdlib_level(caplog: pytest.LogCaptureFixture) -> None:
    """Warn entries are echoed as warnings."""
    logger = TestLogger(min_level="debug")

    with caplog.at_level(logging.DEBUG, logger=CONSOLE_LOGGER_NAME):
        logger.warn("careful")

    assert caplog.records[0].levelno == logging.WARNING


def test_converts_data_to_json() -> None:
    """Dataclasses and exceptions are stored as JSON values."""
    logger = TestLogger()
    summary = TestSuiteSummary(
        total=1, passed=1, failed=0, duration_ms=5, success_rate=100.0
    )

    logger.info("summary", summary)
    logger.error("failure", RuntimeError("boom"))

    exported = json.loads(logger.export())
    assert exported[0]["data"]["success_rate"] == 100.0
    assert exported[1]["data"] == "boom"


def test_rejects_unknown_level() -> None:
    """Unknown levels are a programming error."""
    logger = TestLogger()

    with pytest.raises(ValueError, match="Unknown log level"):
        logger.write("fatal", "message")  # type: ignore[arg-type]

    with pytest.raises(ValueError, match="Unknown log level"):
        TestLogger(min_level="verbose")  # type: ignore[arg-type]
