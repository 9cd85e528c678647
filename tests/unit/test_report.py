"""Tests for the Markdown report."""

from wallet_test_harness.models.result import TestResult
from wallet_test_harness.report import format_results
from wallet_test_harness.summary import summarize

RESULTS = [
    TestResult(name="Topic: Create topic", status="PASS", duration_ms=1200),
    TestResult(
        name="Mirror node: Account lookup",
        status="FAIL",
        duration_ms=300,
        error_message="Failed to request account: 404 not found",
    ),
]


def test_includes_summary_fields() -> None:
    """Summary section lists every summary field."""
    report = format_results(summarize(RESULTS), RESULTS)

    assert "- **Total Tests:** 2" in report
    assert "- **Passed:** 1" in report
    assert "- **Failed:** 1" in report
    assert "- **Duration:** 1500ms (1.50s)" in report
    assert "- **Success Rate:** 50.0%" in report


def test_lists_results_in_input_order() -> None:
    """Each result gets a block, in order, with error when present."""
    report = format_results(summarize(RESULTS), RESULTS)

    first = report.index("### [PASS] Topic: Create topic")
    second = report.index("### [FAIL] Mirror node: Account lookup")
    assert first < second
    assert "- Duration: 1200ms" in report
    assert "- Error: Failed to request account: 404 not found" in report
    assert report.count("- Error:") == 1


def test_is_deterministic() -> None:
    """Same input renders the same document."""
    summary = summarize(RESULTS)

    assert format_results(summary, RESULTS) == format_results(summary, RESULTS)


def test_renders_empty_run() -> None:
    """An empty run still renders a summary."""
    report = format_results(summarize([]), [])

    assert "- **Total Tests:** 0" in report
    assert "- **Success Rate:** 0.0%" in report
    assert "###" not in report
