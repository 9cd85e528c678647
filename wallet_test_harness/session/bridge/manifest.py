"""Wallet bridge session client manifest."""

from wallet_test_harness.session.bridge.client import BridgeSessionClient
from wallet_test_harness.session.bridge.config import BridgeConfig
from wallet_test_harness.session.manifest import SessionManifest

bridge_manifest = SessionManifest(
    config_cls=BridgeConfig,
    session_factory=BridgeSessionClient.from_config,
)
