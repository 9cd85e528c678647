"""Models for session connection validation."""

from typing import Literal

from pydantic import Field

from wallet_test_harness.models.base import Model


class ValidConnection(Model):
    """All connection checks passed."""

    valid: Literal[True] = True
    account_id: str
    network: str
    signer_count: int = Field(..., ge=1)


class InvalidConnection(Model):
    """A connection check failed."""

    valid: Literal[False] = False
    error: str


type ValidationResult = ValidConnection | InvalidConnection
