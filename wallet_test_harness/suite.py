"""Ordered collections of test cases run against a shared session client."""

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar

from wallet_test_harness.exceptions import CaseRegistrationError, MissingParameterError
from wallet_test_harness.logger import TestLogger
from wallet_test_harness.models.result import (
    EXPECTED_OUTCOMES,
    ExpectedOutcome,
    TestResult,
)
from wallet_test_harness.runner import TestCaseRunner
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.session.capabilities import Outcome, capture, describe_error

FAN_OUT_COUNT = 3


@dataclass(frozen=True, kw_only=True)
class SuiteParams:
    """Runtime parameters shared by every case of a run."""

    topic_id: str | None = None

    @property
    def has_topic(self) -> bool:
        """Whether a topic was supplied."""
        return bool(self.topic_id)

    @property
    def topic(self) -> str:
        """The supplied topic ID."""
        if not self.topic_id:
            raise MissingParameterError("No topic ID supplied")
        return self.topic_id


type CaseOperation = Callable[[SuiteParams], Awaitable[Any]]


@dataclass(frozen=True, kw_only=True)
class TestCase:
    """A named scenario with its expected outcome.

    Calling ``operation`` is the case setup; awaiting what it returns is the
    scenario itself. Cases that read ``params.topic`` must set
    ``requires_topic``.
    """

    __test__ = False

    name: str
    operation: CaseOperation
    expected: ExpectedOutcome = "success"
    requires_topic: bool = False
    group: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise CaseRegistrationError("Test case name must not be empty")
        if not callable(self.operation):
            raise CaseRegistrationError(f"Test case '{self.name}' has no operation")
        if self.expected not in EXPECTED_OUTCOMES:
            raise CaseRegistrationError(
                f"Test case '{self.name}' has unknown expected outcome "
                f"'{self.expected}'"
            )


async def fan_out[T](
    factory: Callable[[int], Awaitable[T]], count: int = FAN_OUT_COUNT
) -> Sequence[Outcome[T]]:
    """Start ``count`` calls concurrently and collect one outcome per call.

    Outcomes are returned in launch order; completion order is not tracked.
    """
    return await asyncio.gather(*(capture(factory(i)) for i in range(count)))


@dataclass(kw_only=True)
class TestSuite(ABC):
    """Ordered collection of cases sharing one session client and runner.

    Cases are declared once, at construction, and always run one at a time in
    declaration order.
    """

    __test__ = False

    title: ClassVar[str]

    session: SessionClient
    logger: TestLogger
    runner: TestCaseRunner = field(init=False, repr=False)
    cases: Sequence[TestCase] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.runner = TestCaseRunner(logger=self.logger)
        cases = tuple(self.declare_cases())

        names = [case.name for case in cases]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise CaseRegistrationError(f"Duplicate test case names: {duplicates}")

        self.cases = cases

    @abstractmethod
    def declare_cases(self) -> Sequence[TestCase]:
        """Return the suite's cases in execution order."""

    async def run_all(
        self, params: SuiteParams | None = None, group: str | None = None
    ) -> list[TestResult]:
        """Run every applicable case in declaration order.

        Args:
            params: Runtime parameters; topic cases are skipped without a topic
            group: Only run cases tagged with this group

        Returns:
            One result per case that ran, in declaration order

        """
        params = params or SuiteParams()
        self.logger.info(f"--- {self.title} ---")

        results: list[TestResult] = []
        for case in self.cases:
            if group is not None and case.group != group:
                continue
            if case.requires_topic and not params.has_topic:
                self.logger.debug(f"Skipping (no topic ID): {case.name}")
                continue
            results.append(await self._run_case(case, params))

        passed = sum(1 for result in results if result.passed)
        self.logger.info(
            f"{self.title}: {passed}/{len(results)} passed",
            {"total": len(results), "passed": passed},
        )
        return results

    async def _run_case(self, case: TestCase, params: SuiteParams) -> TestResult:
        try:
            pending = case.operation(params)
        except Exception as e:
            message = f"Case setup failed: {describe_error(e)}"
            self.logger.error(f"FAIL: {case.name} - {message}")
            return TestResult(
                name=case.name, status="FAIL", duration_ms=0, error_message=message
            )

        async def operation() -> Any:
            return await pending

        return await self.runner.run(case.name, operation, case.expected)
