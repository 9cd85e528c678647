"""Edge case suite covering uncommon scenarios and boundary conditions."""

from collections.abc import Awaitable, Sequence

from wallet_test_harness.exceptions import OperationError
from wallet_test_harness.models.session import (
    MirrorAccount,
    TopicMessageTransaction,
    TopicReceipt,
)
from wallet_test_harness.session.capabilities import Err, Ok, capture, fetch_messages
from wallet_test_harness.suite import SuiteParams, TestCase, TestSuite, fan_out
from wallet_test_harness.suites.checks import (
    INVALID_ACCOUNT_ID,
    NON_EXISTENT_TOPIC_ID,
    check_network_consistency,
    rapid_submissions,
    require_account,
)

BALANCE_CHECK_COUNT = 5
LONG_MESSAGE_SIZE = 2000
INVALID_NODE_ACCOUNT_ID = "0.0.999999999"
SPECIAL_MESSAGE = '🚀 Test 特殊文字 <script>alert("xss")</script> \n\t\r'


class EdgeCaseSuite(TestSuite):
    """Boundary conditions of the session client."""

    title = "Edge Case Tests"

    def declare_cases(self) -> Sequence[TestCase]:
        """Return the edge cases in execution order."""
        return [
            # Connection
            TestCase(
                name="Edge Case: Transaction with disconnected wallet",
                operation=self.disconnected_wallet,
            ),
            TestCase(
                name="Edge Case: Network detection consistency",
                operation=self.network_detection,
            ),
            TestCase(
                name="Edge Case: Signer persistence across multiple calls",
                operation=self.signer_persistence,
            ),
            # Transactions
            TestCase(
                name="Edge Case: Transaction without required fields",
                operation=self.transaction_without_fields,
                expected="error",
            ),
            TestCase(
                name="Edge Case: Transaction with invalid node account IDs",
                operation=self.invalid_node_ids,
                expected="error",
            ),
            # Accounts and mirror node
            TestCase(
                name="Edge Case: Invalid account ID format",
                operation=self.invalid_account_id,
                expected="error",
            ),
            TestCase(
                name="Edge Case: Multiple simultaneous balance checks",
                operation=self.simultaneous_balance_checks,
            ),
            # Messages
            TestCase(
                name="Edge Case: Submit to non-existent topic",
                operation=self.non_existent_topic,
                expected="error",
            ),
            TestCase(
                name="Edge Case: Fetch messages from empty topic",
                operation=self.empty_topic_messages,
                expected="either",
            ),
            TestCase(
                name="Edge Case: Null/undefined parameters",
                operation=self.null_parameters,
            ),
            TestCase(
                name="Edge Case: Submit empty message",
                operation=self.empty_message,
                expected="either",
                requires_topic=True,
            ),
            TestCase(
                name="Edge Case: Submit message with special characters",
                operation=self.special_characters,
                requires_topic=True,
            ),
            TestCase(
                name="Edge Case: Submit very long message",
                operation=self.long_message,
                expected="error",
                requires_topic=True,
            ),
            TestCase(
                name="Edge Case: Rapid consecutive transactions",
                operation=self.rapid_transactions,
                requires_topic=True,
            ),
        ]

    async def disconnected_wallet(self, params: SuiteParams) -> bool:
        """The session still reports a connected account."""
        require_account(self.session)
        return True

    async def network_detection(self, params: SuiteParams) -> str:
        """The client and the account agree on the network."""
        return check_network_consistency(self.session)

    async def signer_persistence(self, params: SuiteParams) -> str:
        """Repeated account lookups return the same account."""
        first = self.session.get_account_info()
        second = self.session.get_account_info()

        if first is None or second is None:
            raise OperationError("Account info should be available")
        if first.account_id != second.account_id:
            raise OperationError("Account ID changed between calls")
        return first.account_id

    def transaction_without_fields(
        self, params: SuiteParams
    ) -> Awaitable[TopicReceipt]:
        """A transaction without topic and message is rejected."""
        return self.session.execute_transaction(TopicMessageTransaction())

    def invalid_node_ids(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """A transaction pinned to an unknown node is rejected."""
        transaction = TopicMessageTransaction(
            topic_id="0.0.123456",
            message="test",
            node_account_ids=[INVALID_NODE_ACCOUNT_ID],
        )
        return self.session.execute_transaction(transaction)

    def invalid_account_id(self, params: SuiteParams) -> Awaitable[MirrorAccount]:
        """A malformed account ID is rejected by the mirror node."""
        return self.session.request_account(INVALID_ACCOUNT_ID)

    async def simultaneous_balance_checks(self, params: SuiteParams) -> float:
        """Concurrent balance queries all succeed."""
        outcomes = await fan_out(
            lambda _: self.session.get_account_balance(), BALANCE_CHECK_COUNT
        )

        balances: list[float] = []
        for outcome in outcomes:
            if isinstance(outcome, Err):
                raise OperationError(outcome.reason)
            balances.append(outcome.value)

        unique = sorted(set(balances))
        if len(unique) != 1:
            self.logger.warn(
                f"Got different balances: {', '.join(str(b) for b in unique)}"
            )
        return balances[0]

    def non_existent_topic(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """Submitting to a topic that does not exist is rejected."""
        return self.session.submit_message_to_topic(NON_EXISTENT_TOPIC_ID, "test")

    async def empty_topic_messages(self, params: SuiteParams) -> int:
        """Reading a missing topic reports an error or nothing."""
        outcome = await fetch_messages(self.session, NON_EXISTENT_TOPIC_ID, 0, True)
        return len(outcome.unwrap())

    async def null_parameters(self, params: SuiteParams) -> bool:
        """Missing topic IDs and messages are rejected."""
        submit = self.session.submit_message_to_topic
        problems: list[str] = []

        if isinstance(await capture(submit(None, "test")), Ok):
            problems.append("Accepted null topic ID")
        if isinstance(await capture(submit("0.0.123456", None)), Ok):
            problems.append("Accepted null message")

        if problems:
            raise OperationError(f"Parameter validation issues: {', '.join(problems)}")
        return True

    def empty_message(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """An empty message is either accepted or rejected cleanly."""
        return self.session.submit_message_to_topic(params.topic, "")

    async def special_characters(self, params: SuiteParams) -> int:
        """Unicode, markup and control characters are accepted."""
        receipt = await self.session.submit_message_to_topic(
            params.topic, SPECIAL_MESSAGE
        )
        if not receipt.topic_sequence_number:
            raise OperationError("Failed to submit message with special characters")
        return receipt.topic_sequence_number

    def long_message(self, params: SuiteParams) -> Awaitable[TopicReceipt]:
        """A message over the size limit is rejected."""
        return self.session.submit_message_to_topic(
            params.topic, "A" * LONG_MESSAGE_SIZE
        )

    def rapid_transactions(self, params: SuiteParams) -> Awaitable[int]:
        """Concurrent submissions do not all fail."""
        return rapid_submissions(self.session, self.logger, params.topic)

