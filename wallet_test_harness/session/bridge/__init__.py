"""Wallet bridge session client module."""

from wallet_test_harness.session.bridge.client import BridgeSessionClient
from wallet_test_harness.session.bridge.config import BridgeConfig
from wallet_test_harness.session.bridge.manifest import bridge_manifest

__all__ = ["BridgeConfig", "BridgeSessionClient", "bridge_manifest"]
