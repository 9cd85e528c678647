"""Comprehensive suite covering connection, signer, node and topic behavior."""

from collections.abc import Awaitable, Sequence

from wallet_test_harness.exceptions import OperationError
from wallet_test_harness.models.result import TestResult
from wallet_test_harness.models.session import (
    MirrorAccount,
    TopicMessageTransaction,
    TopicReceipt,
)
from wallet_test_harness.models.validation import ValidConnection
from wallet_test_harness.session.capabilities import fetch_messages
from wallet_test_harness.suite import SuiteParams, TestCase, TestSuite
from wallet_test_harness.suites.checks import (
    ENTITY_ID_PATTERN,
    INVALID_ACCOUNT_ID,
    KNOWN_NETWORKS,
    NON_EXISTENT_TOPIC_ID,
    check_network_consistency,
    now_ms,
    rapid_submissions,
    require_account,
)
from wallet_test_harness.validator import validate_connection

TOPIC_MEMO = "Test topic for comprehensive testing"


class ComprehensiveSuite(TestSuite):
    """Main battery run by the host for a connected wallet.

    Twelve cases run unconditionally; the last four need a topic ID.
    """

    title = "Comprehensive Tests"

    def declare_cases(self) -> Sequence[TestCase]:
        """Return the comprehensive cases in execution order."""
        return [
            TestCase(
                name="Connection: Account info available",
                operation=self.account_info_available,
                group="connection",
            ),
            TestCase(
                name="Connection: Session validation",
                operation=self.session_validation,
                group="connection",
            ),
            TestCase(
                name="Connection: Network prefix detection",
                operation=self.network_prefix_detection,
                group="connection",
            ),
            TestCase(
                name="Connection: Reconnect preserves account",
                operation=self.reconnect_preserves_account,
                group="connection",
            ),
            TestCase(
                name="Signer: Signer attached to session",
                operation=self.signer_attached,
                group="connection",
            ),
            TestCase(
                name="Signer: Signer matches connected account",
                operation=self.signer_matches_account,
                group="connection",
            ),
            TestCase(
                name="Mirror node: Account balance query",
                operation=self.account_balance,
                group="mirror-node",
            ),
            TestCase(
                name="Mirror node: Account lookup",
                operation=self.account_lookup,
                group="mirror-node",
            ),
            TestCase(
                name="Error handling: Malformed account ID rejected",
                operation=self.malformed_account_id,
                expected="error",
                group="error-handling",
            ),
            TestCase(
                name="Topic: Create topic",
                operation=self.create_topic,
                group="topics",
            ),
            TestCase(
                name="Error handling: Transaction without required fields",
                operation=self.transaction_without_fields,
                expected="error",
                group="error-handling",
            ),
            TestCase(
                name="Error handling: Submit to non-existent topic",
                operation=self.submit_to_missing_topic,
                expected="error",
                group="error-handling",
            ),
            TestCase(
                name="Node accounts: Submit message with auto-configured nodes",
                operation=self.submit_with_auto_nodes,
                requires_topic=True,
                group="node-accounts",
            ),
            TestCase(
                name="Node accounts: Execute transaction without node IDs",
                operation=self.execute_without_node_ids,
                requires_topic=True,
                group="node-accounts",
            ),
            TestCase(
                name="Messages: Fetch topic messages",
                operation=self.fetch_topic_messages,
                requires_topic=True,
                group="messages",
            ),
            TestCase(
                name="Node accounts: Rapid consecutive submissions",
                operation=self.rapid_consecutive_submissions,
                requires_topic=True,
                group="node-accounts",
            ),
        ]

    async def test_connection(self) -> list[TestResult]:
        """Run only the connection and signer cases."""
        return await self.run_all(group="connection")

    async def test_node_account_ids(self, topic_id: str | None) -> list[TestResult]:
        """Run only the node account auto-configuration cases."""
        return await self.run_all(SuiteParams(topic_id=topic_id), group="node-accounts")

    async def account_info_available(self, params: SuiteParams) -> str:
        """The session exposes the connected account."""
        return require_account(self.session).account_id

    async def session_validation(self, params: SuiteParams) -> ValidConnection:
        """The connection validator accepts the session."""
        validation = validate_connection(self.session)
        if not isinstance(validation, ValidConnection):
            raise OperationError(validation.error)
        return validation

    async def network_prefix_detection(self, params: SuiteParams) -> str:
        """The network is known and account IDs are well formed."""
        network = check_network_consistency(self.session)
        if network not in KNOWN_NETWORKS:
            raise OperationError(f"Unknown network: {network}")

        account_id = require_account(self.session).account_id
        if not ENTITY_ID_PATTERN.match(account_id):
            raise OperationError(f"Malformed account ID: {account_id}")
        return network

    async def reconnect_preserves_account(self, params: SuiteParams) -> str:
        """Reconnecting restores the same account."""
        before = require_account(self.session)
        await self.session.disconnect()
        after = await self.session.connect()

        if after.account_id != before.account_id:
            raise OperationError(
                f"Account changed after reconnect: {before.account_id} vs "
                f"{after.account_id}"
            )
        return after.account_id

    async def signer_attached(self, params: SuiteParams) -> int:
        """At least one signer is attached to the session."""
        signers = self.session.get_signers()
        if not signers:
            raise OperationError("No signer attached to session")
        return len(signers)

    async def signer_matches_account(self, params: SuiteParams) -> str:
        """The connected account is one of the session signers."""
        account_id = require_account(self.session).account_id
        if account_id not in self.session.get_signers():
            raise OperationError(f"No signer for account {account_id}")
        return account_id

    async def account_balance(self, params: SuiteParams) -> float:
        """The account balance can be queried."""
        balance = await self.session.get_account_balance()
        if balance < 0:
            raise OperationError(f"Negative balance: {balance}")
        return balance

    async def account_lookup(self, params: SuiteParams) -> MirrorAccount:
        """The mirror node knows the connected account."""
        account_id = require_account(self.session).account_id
        account = await self.session.request_account(account_id)
        if account.account_id != account_id:
            raise OperationError(
                f"Mirror node returned {account.account_id} for {account_id}"
            )
        return account

    def malformed_account_id(self, params: SuiteParams) -> Awaitable[MirrorAccount]:
        """A malformed account ID is rejected."""
        return self.session.request_account(INVALID_ACCOUNT_ID)

    def create_topic(self, params: SuiteParams) -> Awaitable[str]:
        """A topic can be created and paid for by the account."""
        return self.session.create_topic(TOPIC_MEMO)

    def transaction_without_fields(
        self, params: SuiteParams
    ) -> Awaitable[TopicReceipt]:
        """A transaction without topic and message is rejected."""
        return self.session.execute_transaction(TopicMessageTransaction())

    def submit_to_missing_topic(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """Submitting to a topic that does not exist is rejected."""
        return self.session.submit_message_to_topic(NON_EXISTENT_TOPIC_ID, "test")

    async def submit_with_auto_nodes(self, params: SuiteParams) -> int:
        """A message submitted without node IDs reaches consensus."""
        receipt = await self.session.submit_message_to_topic(
            params.topic, f"Node auto-config test {now_ms()}"
        )
        if receipt.topic_sequence_number < 1:
            raise OperationError("Missing topic sequence number")
        return receipt.topic_sequence_number

    def execute_without_node_ids(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """The wallet fills in node account IDs for a prepared transaction."""
        transaction = TopicMessageTransaction(
            topic_id=params.topic,
            message=f"Node auto-config transaction {now_ms()}",
        )
        return self.session.execute_transaction(transaction)

    async def fetch_topic_messages(self, params: SuiteParams) -> int:
        """Messages can be read back from the topic."""
        outcome = await fetch_messages(self.session, params.topic, 0, True)
        return len(outcome.unwrap())

    def rapid_consecutive_submissions(self, params: SuiteParams) -> Awaitable[int]:
        """Concurrent submissions do not all fail."""
        return rapid_submissions(self.session, self.logger, params.topic)
