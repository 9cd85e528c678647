"""Execution and classification of a single test case."""

import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from wallet_test_harness.logger import TestLogger
from wallet_test_harness.models.result import ExpectedOutcome, TestResult
from wallet_test_harness.session.capabilities import describe_error

EXPECTED_ERROR_MESSAGE = "Expected error but succeeded"


@dataclass(frozen=True, kw_only=True)
class TestCaseRunner:
    """Runs one operation, times it and classifies it against its expectation.

    An exception raised by the operation is part of the case outcome, never a
    fault of the runner: ``run`` always returns a result for ``Exception``
    subclasses. Cancellation is not intercepted.
    """

    __test__ = False

    logger: TestLogger
    clock: Callable[[], float] = field(default=time.perf_counter, repr=False)

    async def run(
        self,
        name: str,
        operation: Callable[[], Awaitable[Any]],
        expected: ExpectedOutcome = "success",
    ) -> TestResult:
        """Await ``operation`` and return its classified result.

        Args:
            name: Case name used in the result and log lines
            operation: Zero-argument callable returning the awaitable to run
            expected: Outcome the case is expected to have

        Returns:
            PASS when the outcome matches ``expected``, FAIL otherwise

        """
        start = self.clock()
        self.logger.info(f"Starting: {name}")

        try:
            value = await operation()
        except Exception as e:
            return self._classify_error(name, describe_error(e), expected, start)

        duration_ms = self._elapsed_ms(start)

        if expected == "error":
            self.logger.error(
                f"FAIL: {name} - expected error but got success ({duration_ms}ms)"
            )
            return TestResult(
                name=name,
                status="FAIL",
                duration_ms=duration_ms,
                value=value,
                error_message=EXPECTED_ERROR_MESSAGE,
            )

        self.logger.info(f"PASS: {name} ({duration_ms}ms)")
        return TestResult(
            name=name, status="PASS", duration_ms=duration_ms, value=value
        )

    def _classify_error(
        self, name: str, message: str, expected: ExpectedOutcome, start: float
    ) -> TestResult:
        duration_ms = self._elapsed_ms(start)

        if expected == "success":
            self.logger.error(f"FAIL: {name} - {message} ({duration_ms}ms)")
            return TestResult(
                name=name, status="FAIL", duration_ms=duration_ms, error_message=message
            )

        if expected == "error":
            self.logger.info(
                f"PASS: {name} - correctly caught error: {message} ({duration_ms}ms)"
            )
        else:
            self.logger.info(
                f"PASS: {name} - accepted error: {message} ({duration_ms}ms)"
            )
        return TestResult(
            name=name, status="PASS", duration_ms=duration_ms, error_message=message
        )

    def _elapsed_ms(self, start: float) -> int:
        return max(0, round((self.clock() - start) * 1000))
