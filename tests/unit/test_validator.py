"""Tests for connection validation."""

from unittest.mock import Mock

from wallet_test_harness.models.validation import InvalidConnection, ValidConnection
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.testing.factories import AccountInfoFactory
from wallet_test_harness.testing.session import FakeSessionClient
from wallet_test_harness.validator import validate_connection


def test_valid_connection(session: FakeSessionClient) -> None:
    """Returns account, network and signer count when all checks pass."""
    result = validate_connection(session)

    assert result == ValidConnection(
        account_id="0.0.1001", network="testnet", signer_count=1
    )
    assert result.valid is True


def test_missing_account_info() -> None:
    """Reports a disconnected wallet without raising."""
    session = FakeSessionClient(connected=False)

    result = validate_connection(session)

    assert isinstance(result, InvalidConnection)
    assert result.valid is False
    assert "not connected" in result.error


def test_network_mismatch() -> None:
    """Reports disagreeing network accessors."""
    session = FakeSessionClient(network="testnet", account_network="mainnet")

    result = validate_connection(session)

    assert result == InvalidConnection(error="Network mismatch: testnet vs mainnet")


def test_no_signers() -> None:
    """Reports a session without signers."""
    session = FakeSessionClient(signers=[])

    result = validate_connection(session)

    assert result == InvalidConnection(error="No signers attached to session")


def test_stops_at_first_failure() -> None:
    """Later accessors are not consulted once a check fails."""
    session = FakeSessionClient(connected=False)

    validate_connection(session)

    assert session.calls == ["get_account_info"]


def test_accessor_error_is_reported() -> None:
    """An accessor raising is turned into an invalid result."""
    session = Mock(spec=SessionClient)
    session.get_account_info.return_value = AccountInfoFactory.build()
    session.get_network.side_effect = RuntimeError("connector not initialized")

    result = validate_connection(session)

    assert result == InvalidConnection(
        error="Validation failed: connector not initialized"
    )


def test_does_not_call_async_capabilities() -> None:
    """Validation only uses the read-only accessors."""
    session = Mock(spec=SessionClient)
    session.get_account_info.return_value = AccountInfoFactory.build()
    session.get_network.return_value = "testnet"
    session.get_signers.return_value = ["0.0.1001", "0.0.1002"]

    result = validate_connection(session)

    assert result == ValidConnection(
        account_id="0.0.1001", network="testnet", signer_count=2
    )
    session.connect.assert_not_called()
    session.disconnect.assert_not_called()
