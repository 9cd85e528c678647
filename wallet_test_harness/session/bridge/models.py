"""Pydantic models for wallet bridge API responses."""

from collections.abc import Sequence

from pydantic import BaseModel

from wallet_test_harness.models.session import TopicMessage


class SessionResponse(BaseModel):
    """Response from the session creation API."""

    account_id: str
    network: str
    signers: Sequence[str]


class BalanceResponse(BaseModel):
    """Response from the account balance API."""

    balance: float


class TopicResponse(BaseModel):
    """Response from the topic creation API."""

    topic_id: str


class MessagesPage(BaseModel):
    """Response from the topic messages API."""

    messages: Sequence[TopicMessage]
