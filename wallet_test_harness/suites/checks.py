"""Scenario steps shared by the built-in suites."""

import re
import time

from wallet_test_harness.exceptions import OperationError
from wallet_test_harness.logger import TestLogger
from wallet_test_harness.models.session import AccountInfo
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.session.capabilities import Ok
from wallet_test_harness.suite import FAN_OUT_COUNT, fan_out

NON_EXISTENT_TOPIC_ID = "0.0.999999999999"
INVALID_ACCOUNT_ID = "invalid-account-id"
KNOWN_NETWORKS = frozenset(["mainnet", "testnet", "previewnet", "local-node"])
ENTITY_ID_PATTERN = re.compile(r"^\d+\.\d+\.\d+(-[a-z]{5})?$")


def now_ms() -> int:
    """Current wall clock time in milliseconds, used to make messages unique."""
    return int(time.time() * 1000)


def require_account(session: SessionClient) -> AccountInfo:
    """Return the connected account or fail the case."""
    account = session.get_account_info()
    if account is None:
        raise OperationError("Wallet is disconnected")
    return account


def check_network_consistency(session: SessionClient) -> str:
    """Fail when the client and the account disagree on the network."""
    network = session.get_network()
    account = session.get_account_info()
    account_network = account.network if account is not None else None

    if str(network) != str(account_network):
        raise OperationError(f"Network mismatch: {network} vs {account_network}")
    return str(network)


async def rapid_submissions(
    session: SessionClient, logger: TestLogger, topic_id: str
) -> int:
    """Submit several messages at once; at least one must be accepted."""
    stamp = now_ms()
    outcomes = await fan_out(
        lambda i: session.submit_message_to_topic(topic_id, f"Rapid test {i} - {stamp}")
    )

    successes = sum(1 for outcome in outcomes if isinstance(outcome, Ok))
    if successes == 0:
        raise OperationError("All rapid transactions failed")

    logger.info(f"{successes}/{FAN_OUT_COUNT} rapid transactions succeeded")
    return successes
