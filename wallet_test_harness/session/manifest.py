"""Manifest a session client plugin publishes under its entry point."""

from collections.abc import Callable, Mapping
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from wallet_test_harness.session.base import SessionClient

type SessionFactory[ConfigT] = Callable[
    [ConfigT], AbstractAsyncContextManager[SessionClient]
]


@dataclass(frozen=True, kw_only=True)
class SessionManifest[ConfigT: BaseModel]:
    """How to configure and open one kind of session client.

    Opening the client is left to ``session_factory`` so the harness owns
    the connection lifetime and disconnects the transport when a run ends.
    """

    config_cls: type[ConfigT]
    session_factory: SessionFactory[ConfigT]

    def build_config(self, raw: Mapping[str, Any]) -> ConfigT:
        """Validate the host-supplied settings for this client.

        Args:
            raw: Decoded ``--session-config`` JSON object

        Returns:
            The validated client configuration

        Raises:
            pydantic.ValidationError: If a setting is missing or malformed

        """
        return self.config_cls.model_validate(raw)
