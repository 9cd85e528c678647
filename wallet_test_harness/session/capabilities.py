"""Normalization of session client outcomes into tagged results."""

from collections.abc import Awaitable, Sequence
from dataclasses import dataclass
from typing import NoReturn

from wallet_test_harness.exceptions import OperationError
from wallet_test_harness.models.session import TopicMessage
from wallet_test_harness.session.base import SessionClient


@dataclass(frozen=True, kw_only=True)
class Ok[T]:
    """Operation completed with a value."""

    value: T

    def unwrap(self) -> T:
        """Return the value."""
        return self.value


@dataclass(frozen=True, kw_only=True)
class Err:
    """Operation failed for the given reason."""

    reason: str

    def unwrap(self) -> NoReturn:
        """Raise the failure as an OperationError."""
        raise OperationError(self.reason)


type Outcome[T] = Ok[T] | Err


def describe_error(error: BaseException) -> str:
    """Return a human readable message for an exception."""
    return str(error) or type(error).__name__


async def capture[T](awaitable: Awaitable[T]) -> Outcome[T]:
    """Await an operation and convert a raised exception into an Err."""
    try:
        return Ok(value=await awaitable)
    except Exception as e:
        return Err(reason=describe_error(e))


async def fetch_messages(
    session: SessionClient, topic_id: str, start: int = 0, ascending: bool = True
) -> Outcome[Sequence[TopicMessage]]:
    """Read topic messages, reporting lookup errors as an Err."""
    response = await session.get_messages(topic_id, start, ascending)
    if response.error is not None:
        return Err(reason=response.error)
    return Ok(value=response.messages)
