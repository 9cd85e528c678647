"""Aggregation of test results into summary statistics."""

from collections.abc import Sequence

from wallet_test_harness.models.result import TestResult, TestSuiteSummary


def summarize(results: Sequence[TestResult]) -> TestSuiteSummary:
    """Summarize a result list.

    The duration is the sum of the case durations. The success rate is a
    percentage and is 0 for an empty list.
    """
    total = len(results)
    passed = sum(1 for result in results if result.status == "PASS")

    return TestSuiteSummary(
        total=total,
        passed=passed,
        failed=total - passed,
        duration_ms=sum(result.duration_ms for result in results),
        success_rate=passed / total * 100 if total else 0.0,
    )
