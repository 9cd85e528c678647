"""Tests for the edge case suite."""

from unittest.mock import AsyncMock

import pytest

from wallet_test_harness.exceptions import SessionOperationError
from wallet_test_harness.logger import TestLogger
from wallet_test_harness.models.result import TestResult
from wallet_test_harness.models.session import TopicReceipt
from wallet_test_harness.suite import SuiteParams
from wallet_test_harness.suites.edge_cases import (
    LONG_MESSAGE_SIZE,
    SPECIAL_MESSAGE,
    EdgeCaseSuite,
)
from wallet_test_harness.testing.session import FakeSessionClient

TOPIC_ID = "0.0.5000"


@pytest.fixture
def suite(session: FakeSessionClient, logger: TestLogger) -> EdgeCaseSuite:
    return EdgeCaseSuite(session=session, logger=logger)


def by_name(results: list[TestResult]) -> dict[str, TestResult]:
    return {result.name: result for result in results}


class TestRunAll:
    async def test_healthy_wallet_passes_everything(
        self, suite: EdgeCaseSuite
    ) -> None:
        """All fourteen cases pass against a well-behaved wallet."""
        results = await suite.run_all(SuiteParams(topic_id=TOPIC_ID))

        assert len(results) == 14
        assert [r.name for r in results if not r.passed] == []
        assert all(r.name.startswith("Edge Case: ") for r in results)

    async def test_topic_cases_skipped_without_topic(
        self, suite: EdgeCaseSuite
    ) -> None:
        """Without a topic only the ten unconditional cases run."""
        results = await suite.run_all()

        names = [r.name for r in results]
        assert len(names) == 10
        assert names[0] == "Edge Case: Transaction with disconnected wallet"
        assert names[-1] == "Edge Case: Null/undefined parameters"

    async def test_disconnected_wallet(self, logger: TestLogger) -> None:
        """A disconnected wallet fails the connection checks."""
        suite = EdgeCaseSuite(
            session=FakeSessionClient(connected=False), logger=logger
        )

        results = by_name(await suite.run_all())

        disconnected = results["Edge Case: Transaction with disconnected wallet"]
        assert disconnected.error_message == "Wallet is disconnected"
        persistence = results["Edge Case: Signer persistence across multiple calls"]
        assert persistence.error_message == "Account info should be available"

    async def test_error_cases_record_wallet_message(
        self, suite: EdgeCaseSuite
    ) -> None:
        """Expected rejections pass and keep the wallet's message."""
        results = by_name(await suite.run_all(SuiteParams(topic_id=TOPIC_ID)))

        invalid_nodes = results["Edge Case: Transaction with invalid node account IDs"]
        assert invalid_nodes.passed
        assert invalid_nodes.error_message == "INVALID_NODE_ACCOUNT: 0.0.999999999"
        long_message = results["Edge Case: Submit very long message"]
        assert long_message.error_message == (
            "Message size exceeds limit of 1024 bytes"
        )

    async def test_wallet_accepting_long_message_fails(
        self, logger: TestLogger
    ) -> None:
        """A wallet without a size limit fails the long message case."""
        session = FakeSessionClient(max_message_size=LONG_MESSAGE_SIZE * 2)
        suite = EdgeCaseSuite(session=session, logger=logger)

        results = by_name(await suite.run_all(SuiteParams(topic_id=TOPIC_ID)))

        result = results["Edge Case: Submit very long message"]
        assert result.status == "FAIL"
        assert result.error_message == "Expected error but succeeded"

    async def test_special_characters_are_preserved(
        self, suite: EdgeCaseSuite, session: FakeSessionClient
    ) -> None:
        """The special character message reaches the topic unchanged."""
        await suite.run_all(SuiteParams(topic_id=TOPIC_ID))

        assert SPECIAL_MESSAGE in [m.message for m in session.topics[TOPIC_ID]]


class TestBalanceChecks:
    async def test_any_failure_fails_case(
        self, suite: EdgeCaseSuite, session: FakeSessionClient
    ) -> None:
        """One failed balance query fails the case."""
        session.get_account_balance = AsyncMock(  # type: ignore[method-assign]
            side_effect=[1.0, 1.0, SessionOperationError("timeout"), 1.0, 1.0]
        )

        results = by_name(await suite.run_all())

        result = results["Edge Case: Multiple simultaneous balance checks"]
        assert result.error_message == "timeout"
        assert session.get_account_balance.await_count == 5

    async def test_differing_balances_warn(
        self,
        suite: EdgeCaseSuite,
        session: FakeSessionClient,
        logger: TestLogger,
    ) -> None:
        """Differing balances are logged but still pass."""
        session.get_account_balance = AsyncMock(  # type: ignore[method-assign]
            side_effect=[100.0, 100.0, 99.5, 100.0, 100.0]
        )

        results = by_name(await suite.run_all())

        assert results["Edge Case: Multiple simultaneous balance checks"].passed
        warnings = [e for e in logger.entries if e.level == "warn"]
        assert [e.message for e in warnings] == [
            "Got different balances: 99.5, 100.0"
        ]


class TestParameterValidation:
    async def test_permissive_wallet_fails(
        self, suite: EdgeCaseSuite, session: FakeSessionClient
    ) -> None:
        """Accepting missing parameters fails the case with both problems."""
        session.submit_message_to_topic = AsyncMock(  # type: ignore[method-assign]
            return_value=TopicReceipt(topic_sequence_number=1)
        )

        results = by_name(await suite.run_all())

        result = results["Edge Case: Null/undefined parameters"]
        assert result.error_message == (
            "Parameter validation issues: Accepted null topic ID, "
            "Accepted null message"
        )

    async def test_rapid_transactions_all_failing(
        self, suite: EdgeCaseSuite, session: FakeSessionClient
    ) -> None:
        """Rapid submissions fail only when every submission fails."""
        session.failures = {
            "submit_message_to_topic": SessionOperationError("BUSY")
        }

        results = by_name(await suite.run_all(SuiteParams(topic_id=TOPIC_ID)))

        rapid = results["Edge Case: Rapid consecutive transactions"]
        assert rapid.error_message == "All rapid transactions failed"
        assert results["Edge Case: Submit empty message"].passed


def test_every_case_step_is_documented(suite: EdgeCaseSuite) -> None:
    """Each case step describes the behavior it checks."""
    undocumented = [case.name for case in suite.cases if not case.operation.__doc__]

    assert undocumented == []
