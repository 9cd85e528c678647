"""Test factories for generating test data."""

from polyfactory.factories import DataclassFactory
from polyfactory.factories.pydantic_factory import ModelFactory

from wallet_test_harness.models.result import TestResult
from wallet_test_harness.models.session import AccountInfo


class TestResultFactory(DataclassFactory[TestResult]):
    """Factory for TestResult."""

    __model__ = TestResult

    value = None
    error_message = None


class AccountInfoFactory(ModelFactory[AccountInfo]):
    """Factory for AccountInfo."""

    account_id = "0.0.1001"
    network = "testnet"
