"""Read-only inspection of a session client's connection state."""

import logging

from wallet_test_harness.models.validation import (
    InvalidConnection,
    ValidationResult,
    ValidConnection,
)
from wallet_test_harness.session.base import SessionClient
from wallet_test_harness.session.capabilities import describe_error

log = logging.getLogger(__name__)


def validate_connection(session: SessionClient) -> ValidationResult:
    """Check that the session has an account, a consistent network and a signer.

    Checks run in order and stop at the first failure. Only synchronous
    accessors are used, so validation never changes session state. Errors
    raised by the accessors are reported as an invalid connection.
    """
    try:
        account = session.get_account_info()
        if account is None:
            return InvalidConnection(error="No account info - wallet is not connected")

        network = session.get_network()
        if str(network) != str(account.network):
            return InvalidConnection(
                error=f"Network mismatch: {network} vs {account.network}"
            )

        signer_count = len(session.get_signers())
        if signer_count < 1:
            return InvalidConnection(error="No signers attached to session")
    except Exception as e:
        log.warning("Connection validation raised: %s", e, exc_info=e)
        return InvalidConnection(error=f"Validation failed: {describe_error(e)}")

    return ValidConnection(
        account_id=account.account_id,
        network=str(network),
        signer_count=signer_count,
    )
