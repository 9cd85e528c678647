"""Test orchestrator for running suites against a single session client."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from wallet_test_harness.logger import TestLogger
from wallet_test_harness.models.result import SuiteRun, TestResult
from wallet_test_harness.suite import SuiteParams, TestSuite
from wallet_test_harness.summary import summarize

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class TestOrchestrator:
    """Runs suites one after another and summarizes their combined results."""

    __test__ = False

    suites: Sequence[TestSuite]
    logger: TestLogger

    async def run(self, params: SuiteParams | None = None) -> SuiteRun:
        """Run all suites in order.

        Args:
            params: Runtime parameters passed to every suite

        Returns:
            Summary and results of all suites, in suite then case order

        """
        params = params or SuiteParams()
        if not self.suites:
            log.info("No suites selected")
            return SuiteRun(summary=summarize([]), results=[])

        log.info("Running %d suite(s)...", len(self.suites))
        self.logger.info("Starting test suite", {"topic_id": params.topic_id})

        results: list[TestResult] = []
        for suite in self.suites:
            results.extend(await suite.run_all(params))

        summary = summarize(results)
        self.logger.info("Test suite completed", summary)
        log.info("Run completed: %d/%d passed", summary.passed, summary.total)

        return SuiteRun(summary=summary, results=results)
