"""Rendering of run results into a Markdown report."""

from collections.abc import Sequence

from wallet_test_harness.models.result import TestResult, TestSuiteSummary


def format_results(summary: TestSuiteSummary, results: Sequence[TestResult]) -> str:
    """Render the summary followed by one block per result, in input order."""
    lines = [
        "# Test Results",
        "",
        "## Summary",
        "",
        f"- **Total Tests:** {summary.total}",
        f"- **Passed:** {summary.passed}",
        f"- **Failed:** {summary.failed}",
        f"- **Duration:** {summary.duration_ms}ms "
        f"({summary.duration_ms / 1000:.2f}s)",
        f"- **Success Rate:** {summary.success_rate:.1f}%",
        "",
        "## Detailed Results",
    ]

    for result in results:
        lines.extend(
            [
                "",
                f"### [{result.status}] {result.name}",
                "",
                f"- Duration: {result.duration_ms}ms",
            ]
        )
        if result.error_message:
            lines.append(f"- Error: {result.error_message}")

    return "\n".join(lines) + "\n"
