"""Abstract base class for wallet session clients."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from wallet_test_harness.models.session import (
    AccountInfo,
    MessagesResponse,
    MirrorAccount,
    TopicMessageTransaction,
    TopicReceipt,
)


class SessionClient(ABC):
    """Capability surface of a wallet/ledger session.

    A single instance is shared by every suite in a run. Synchronous accessors
    return the client's cached session snapshot and must not perform network
    calls; asynchronous methods may fail by raising.
    """

    @abstractmethod
    async def connect(self) -> AccountInfo:
        """Establish a session and return the connected account."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Tear down the current session."""

    @abstractmethod
    def get_account_info(self) -> AccountInfo | None:
        """Return the connected account, or None when disconnected."""

    @abstractmethod
    def get_network(self) -> str:
        """Return the network identifier the client is configured for."""

    @abstractmethod
    def get_signers(self) -> Sequence[str]:
        """Return the account IDs of the signers attached to the session."""

    @abstractmethod
    async def get_account_balance(self) -> float:
        """Return the connected account balance in HBAR.

        Must be safe to call concurrently.
        """

    @abstractmethod
    async def submit_message_to_topic(
        self, topic_id: str | None, message: str | None
    ) -> TopicReceipt:
        """Submit a message to a consensus topic."""

    @abstractmethod
    async def execute_transaction(
        self, transaction: TopicMessageTransaction
    ) -> TopicReceipt:
        """Sign and execute a prepared transaction."""

    @abstractmethod
    async def create_topic(self, memo: str) -> str:
        """Create a consensus topic and return its ID."""

    @abstractmethod
    async def request_account(self, account_id: str) -> MirrorAccount:
        """Look up an account on the mirror node."""

    @abstractmethod
    async def get_messages(
        self, topic_id: str, start: int = 0, ascending: bool = True
    ) -> MessagesResponse:
        """Read topic messages starting at a sequence number.

        Args:
            topic_id: Topic to read from
            start: First sequence number to return
            ascending: Return messages oldest first

        Returns:
            Messages, or an error description when the lookup failed

        """
