"""Discovery of session client plugins."""

from importlib.metadata import entry_points
from typing import Any

from wallet_test_harness.exceptions import HarnessError
from wallet_test_harness.session.manifest import SessionManifest

ENTRY_POINT_GROUP = "wallet_test_harness.sessions"


class SessionNotFoundError(HarnessError):
    """Raised when no installed plugin provides the requested session client."""


def available_sessions() -> list[str]:
    """Names of the installed session client plugins, sorted."""
    return sorted(entry.name for entry in entry_points(group=ENTRY_POINT_GROUP))


def load_session_manifest(key: str) -> SessionManifest[Any]:
    """Import the plugin registered as ``key`` and return its manifest.

    Only the selected plugin is imported, so a client with unavailable
    dependencies does not break the others.
    """
    matches = entry_points(group=ENTRY_POINT_GROUP, name=key)
    if not matches:
        raise SessionNotFoundError(
            f"Session client '{key}' not found. "
            f"Available session clients: {available_sessions()}"
        )

    entry = matches[key]
    manifest = entry.load()
    if not isinstance(manifest, SessionManifest):
        raise SessionNotFoundError(
            f"Entry point '{key}' ({entry.value}) is not a session manifest"
        )
    return manifest
