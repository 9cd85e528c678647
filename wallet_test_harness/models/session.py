"""Data exchanged with session clients."""

from collections.abc import Sequence

from pydantic import Field

from wallet_test_harness.models.base import Model


class AccountInfo(Model):
    """Snapshot of the account attached to the current session."""

    account_id: str
    network: str


class MirrorAccount(Model):
    """Account details as reported by the mirror node."""

    account_id: str
    balance: int = Field(..., description="Balance in tinybars")
    key: str | None = None


class TopicReceipt(Model):
    """Receipt of a consensus topic message submission."""

    topic_sequence_number: int


class TopicMessage(Model):
    """A message read back from a consensus topic."""

    sequence_number: int
    message: str
    consensus_timestamp: str


class MessagesResponse(Model):
    """Result of a topic message query.

    The query never raises; a missing topic or failed lookup is reported
    through ``error`` instead.
    """

    messages: Sequence[TopicMessage] = Field(default_factory=tuple)
    error: str | None = None


class TopicMessageTransaction(Model):
    """Topic message submission to execute through the wallet signer.

    Every field is optional so incomplete transactions can be submitted on
    purpose; node account IDs are chosen by the wallet when left empty.
    """

    topic_id: str | None = None
    message: str | None = None
    node_account_ids: Sequence[str] = Field(default_factory=tuple)
