"""Shared fixtures."""

from collections.abc import Generator

import pytest
from aioresponses import aioresponses as aioresponses_cls

from wallet_test_harness.logger import TestLogger
from wallet_test_harness.testing.session import FakeSessionClient


@pytest.fixture
def aioresponses() -> Generator[aioresponses_cls]:
    """Intercept aiohttp requests."""
    with aioresponses_cls() as mocked:
        yield mocked


@pytest.fixture
def logger() -> TestLogger:
    """Create a logger that keeps every level."""
    return TestLogger(min_level="debug")


@pytest.fixture
def session() -> FakeSessionClient:
    """Create a connected in-memory session client."""
    return FakeSessionClient()
