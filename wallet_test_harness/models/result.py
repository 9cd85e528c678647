"""Models for test case execution results."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Literal

type ExpectedOutcome = Literal["success", "error", "either"]

EXPECTED_OUTCOMES: frozenset[str] = frozenset(["success", "error", "either"])


@dataclass(frozen=True, kw_only=True)
class TestResult:
    """Result of a single test case execution."""

    __test__ = False

    name: str
    status: Literal["PASS", "FAIL"]
    duration_ms: int
    value: Any = None
    error_message: str | None = None

    @property
    def passed(self) -> bool:
        """Whether the case outcome matched its expected outcome."""
        return self.status == "PASS"


@dataclass(frozen=True, kw_only=True)
class TestSuiteSummary:
    """Summary statistics derived from a list of results."""

    __test__ = False

    total: int
    passed: int
    failed: int
    duration_ms: int
    success_rate: float


@dataclass(frozen=True, kw_only=True)
class SuiteRun:
    """Summary and ordered results of a complete run."""

    summary: TestSuiteSummary
    results: Sequence[TestResult]
