"""Wallet bridge session client implementation."""

import logging
from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from typing import Any

import aiohttp

from wallet_test_harness.exceptions import SessionOperationError
from wallet_test_harness.models.session import (
    AccountInfo,
    MessagesResponse,
    MirrorAccount,
    TopicMessageTransaction,
    TopicReceipt,
)
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.session.bridge.config import BridgeConfig
from wallet_test_harness.session.bridge.models import (
    BalanceResponse,
    MessagesPage,
    SessionResponse,
    TopicResponse,
)

log = logging.getLogger(__name__)


@dataclass(kw_only=True)
class BridgeSessionState:
    """Snapshot of the session returned by the bridge on connect."""

    account: AccountInfo | None = None
    signers: Sequence[str] = ()


async def read_error(response: aiohttp.ClientResponse) -> str:
    """Extract the bridge error message from a failed response."""
    text = await response.text()
    try:
        data = await response.json(content_type=None)
    except ValueError:
        return text
    if isinstance(data, dict) and isinstance(data.get("error"), str):
        return data["error"]
    return text


@dataclass(frozen=True, kw_only=True)
class BridgeSessionClient(SessionClient):
    """Session client backed by the wallet bridge HTTP API."""

    config: BridgeConfig
    session: aiohttp.ClientSession = field(repr=False)
    state: BridgeSessionState = field(default_factory=BridgeSessionState)

    @classmethod
    @asynccontextmanager
    async def from_config(
        cls, config: BridgeConfig
    ) -> AsyncGenerator["BridgeSessionClient", None]:
        """Create client with managed HTTP session lifecycle."""
        headers = {
            "Authorization": f"Bearer {config.token.get_secret_value()}",
            "Accept": "application/json",
        }
        async with aiohttp.ClientSession(
            base_url=config.api_base_url,
            headers=headers,
        ) as session:
            yield cls(config=config, session=session)

    async def connect(self) -> AccountInfo:
        """Pair with the wallet and cache the session snapshot."""
        payload = {"network": self.config.network}
        async with self.session.post("/v1/session", json=payload) as response:
            if response.status != 200:
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to connect: {response.status} {error}"
                )
            data = await response.json()

        created = SessionResponse.model_validate(data)
        account = AccountInfo(account_id=created.account_id, network=created.network)
        self.state.account = account
        self.state.signers = tuple(created.signers)
        log.info(
            "Connected to %s on %s with %d signer(s)",
            account.account_id,
            account.network,
            len(created.signers),
        )
        return account

    async def disconnect(self) -> None:
        """Close the wallet session and drop the cached snapshot."""
        async with self.session.delete("/v1/session") as response:
            if response.status not in (200, 204):
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to disconnect: {response.status} {error}"
                )

        self.state.account = None
        self.state.signers = ()
        log.info("Disconnected from bridge session")

    def get_account_info(self) -> AccountInfo | None:
        """Return the cached account snapshot."""
        return self.state.account

    def get_network(self) -> str:
        """Return the configured network."""
        return self.config.network

    def get_signers(self) -> Sequence[str]:
        """Return the cached signer account IDs."""
        return self.state.signers

    async def get_account_balance(self) -> float:
        """Query the connected account balance."""
        account = self._require_account()
        url = f"/v1/accounts/{account.account_id}/balance"

        async with self.session.get(url) as response:
            if response.status != 200:
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to get balance: {response.status} {error}"
                )
            data = await response.json()

        return BalanceResponse.model_validate(data).balance

    async def submit_message_to_topic(
        self, topic_id: str | None, message: str | None
    ) -> TopicReceipt:
        """Submit a topic message signed by the connected wallet."""
        if not topic_id:
            raise SessionOperationError(f"Invalid topic ID: {topic_id!r}")

        url = f"/v1/topics/{topic_id}/messages"
        return await self._post_for_receipt(url, {"message": message}, "submit message")

    async def execute_transaction(
        self, transaction: TopicMessageTransaction
    ) -> TopicReceipt:
        """Execute a topic message transaction through the wallet signer."""
        payload = {
            "type": "topic_message_submit",
            **transaction.model_dump(mode="json"),
        }
        return await self._post_for_receipt(
            "/v1/transactions", payload, "execute transaction"
        )

    async def create_topic(self, memo: str) -> str:
        """Create a topic paid for by the connected account."""
        async with self.session.post("/v1/topics", json={"memo": memo}) as response:
            if response.status not in (200, 201):
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to create topic: {response.status} {error}"
                )
            data = await response.json()

        topic_id = TopicResponse.model_validate(data).topic_id
        log.info("Created topic %s", topic_id)
        return topic_id

    async def request_account(self, account_id: str) -> MirrorAccount:
        """Look up an account through the bridge's mirror node proxy."""
        async with self.session.get(f"/v1/accounts/{account_id}") as response:
            if response.status != 200:
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to request account: {response.status} {error}"
                )
            data = await response.json()

        return MirrorAccount.model_validate(data)

    async def get_messages(
        self, topic_id: str, start: int = 0, ascending: bool = True
    ) -> MessagesResponse:
        """Read topic messages, reporting failures in the response."""
        url = f"/v1/topics/{topic_id}/messages"
        params = {"start": str(start), "order": "asc" if ascending else "desc"}

        try:
            async with self.session.get(url, params=params) as response:
                if response.status != 200:
                    error = await read_error(response)
                    return MessagesResponse(error=f"{response.status} {error}")
                data = await response.json()
            page = MessagesPage.model_validate(data)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            log.warning("Message lookup for topic %s failed: %s", topic_id, e)
            return MessagesResponse(error=str(e) or type(e).__name__)

        return MessagesResponse(messages=page.messages)

    async def _post_for_receipt(
        self, url: str, payload: dict[str, Any], action: str
    ) -> TopicReceipt:
        async with self.session.post(url, json=payload) as response:
            if response.status != 200:
                error = await read_error(response)
                raise SessionOperationError(
                    f"Failed to {action}: {response.status} {error}"
                )
            data = await response.json()

        return TopicReceipt.model_validate(data)

    def _require_account(self) -> AccountInfo:
        if self.state.account is None:
            raise SessionOperationError("Wallet is not connected")
        return self.state.account
