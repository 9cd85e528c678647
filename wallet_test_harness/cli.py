"""CLI entry point for running the wallet test harness."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import aiohttp

from wallet_test_harness.config import HarnessConfig, SuiteKey
from wallet_test_harness.exceptions import SessionOperationError
from wallet_test_harness.logger import STDLIB_LEVELS, TestLogger
from wallet_test_harness.models.result import SuiteRun
from wallet_test_harness.models.validation import ValidConnection
from wallet_test_harness.orchestrator import TestOrchestrator
from wallet_test_harness.report import format_results
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.session.capabilities import describe_error
from wallet_test_harness.session.loading import load_session_manifest
from wallet_test_harness.suite import SuiteParams, TestSuite
from wallet_test_harness.suites.comprehensive import ComprehensiveSuite
from wallet_test_harness.suites.edge_cases import EdgeCaseSuite
from wallet_test_harness.validator import validate_connection

SUITES: Mapping[SuiteKey, type[TestSuite]] = {
    "comprehensive": ComprehensiveSuite,
    "edge-cases": EdgeCaseSuite,
}

STATUS_SYMBOLS = {
    "PASS": "✅",
    "FAIL": "❌",
}

EXIT_INVALID_CONNECTION = 2

# ValueError covers malformed replies, including pydantic ValidationError.
CONNECT_ERRORS = (SessionOperationError, aiohttp.ClientError, TimeoutError, ValueError)


def log_results_summary(log: logging.Logger, suite_run: SuiteRun) -> None:
    """Log a formatted summary of test results."""
    summary = suite_run.summary
    log.info("=" * 80)
    log.info("Test Results Summary:")
    log.info("=" * 80)

    for result in suite_run.results:
        symbol = STATUS_SYMBOLS.get(result.status, "?")
        log.info("%s %s (%dms)", symbol, result.name, result.duration_ms)
        if result.error_message:
            log.info("  Message: %s", result.error_message)

    log.info(
        "Total: %d, Passed: %d, Failed: %d, Success rate: %.1f%%",
        summary.total,
        summary.passed,
        summary.failed,
        summary.success_rate,
    )

    failures = [result for result in suite_run.results if not result.passed]
    if failures:
        log.info("Failed Tests:")
        for result in failures:
            log.info("  - %s: %s", result.name, result.error_message)


def format_output(suite_run: SuiteRun) -> dict[str, Any]:
    """Format a run for JSON output."""
    summary = suite_run.summary
    return {
        "total": summary.total,
        "passed": summary.passed,
        "failed": summary.failed,
        "duration_ms": summary.duration_ms,
        "success_rate": round(summary.success_rate, 1),
        "results": [
            {
                "name": result.name,
                "status": result.status,
                "duration_ms": result.duration_ms,
                "error": result.error_message,
            }
            for result in suite_run.results
        ],
    }


def build_suites(
    keys: Sequence[SuiteKey], session: SessionClient, logger: TestLogger
) -> Sequence[TestSuite]:
    """Instantiate the selected suites in the given order."""
    return [SUITES[key](session=session, logger=logger) for key in keys]


def write_exports(
    config: HarnessConfig, logger: TestLogger, suite_run: SuiteRun | None
) -> None:
    """Write the report and log exports requested by the configuration."""
    if config.report_path is not None and suite_run is not None:
        config.report_path.write_text(
            format_results(suite_run.summary, suite_run.results), encoding="utf-8"
        )
        logger.info(f"Results exported to {config.report_path}")

    if config.log_path is not None:
        logger.info(f"Logs exported to {config.log_path}")
        config.log_path.write_text(logger.export(), encoding="utf-8")


async def run(
    session_key: str,
    session_config_json: str,
    config: HarnessConfig,
) -> int:
    """Run the selected suites and return exit code."""
    log = logging.getLogger("wallet_test_harness")
    logger = TestLogger(min_level=config.min_log_level)

    log.info("Loading session client: %s", session_key)
    manifest = load_session_manifest(session_key)
    session_config = manifest.build_config(json.loads(session_config_json))

    async with manifest.session_factory(session_config) as session:
        if session.get_account_info() is None:
            logger.info("Starting wallet connection")
            try:
                account = await session.connect()
            except CONNECT_ERRORS as e:
                reason = describe_error(e)
                logger.error("Connection failed", reason)
                write_exports(config, logger, None)
                print(json.dumps({"valid": False, "error": reason}))
                return EXIT_INVALID_CONNECTION
            logger.info(f"Connected to {account.account_id}")

        validation = validate_connection(session)
        if not isinstance(validation, ValidConnection):
            logger.warn("Connection validation failed", validation)
            write_exports(config, logger, None)
            print(json.dumps({"valid": False, "error": validation.error}))
            return EXIT_INVALID_CONNECTION
        logger.info("Connection validated", validation)

        orchestrator = TestOrchestrator(
            suites=build_suites(config.suites, session, logger), logger=logger
        )
        suite_run = await orchestrator.run(SuiteParams(topic_id=config.topic_id))

    log_results_summary(log, suite_run)
    write_exports(config, logger, suite_run)
    print(json.dumps(format_output(suite_run), indent=2))

    return 1 if suite_run.summary.failed else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run wallet session test suites against a session client"
    )
    parser.add_argument(
        "--session",
        required=True,
        help="Session client key (e.g., bridge)",
    )
    parser.add_argument(
        "--session-config",
        required=True,
        help="JSON configuration for the session client",
    )
    parser.add_argument(
        "--suite",
        action="append",
        choices=sorted(SUITES),
        help="Suite to run; repeat to run several (default: comprehensive)",
    )
    parser.add_argument(
        "--topic-id",
        default=None,
        help="Topic ID for topic cases; they are skipped when omitted",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=list(STDLIB_LEVELS),
        help="Lowest log level echoed to the console",
    )
    parser.add_argument(
        "--report",
        type=Path,
        default=None,
        help="Path of the Markdown results report to write",
    )
    parser.add_argument(
        "--logs",
        type=Path,
        default=None,
        help="Path of the JSON log export to write",
    )

    args = parser.parse_args()

    config = HarnessConfig(
        suites=args.suite or ["comprehensive"],
        topic_id=args.topic_id,
        min_log_level=args.log_level,
        report_path=args.report,
        log_path=args.logs,
    )

    logging.basicConfig(
        level=STDLIB_LEVELS[config.min_log_level],
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(
        run(
            session_key=args.session,
            session_config_json=args.session_config,
            config=config,
        )
    )
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
