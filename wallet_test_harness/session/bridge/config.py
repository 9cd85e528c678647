"""Configuration for the wallet bridge session client."""

from pydantic import BaseModel, SecretStr


class BridgeConfig(BaseModel):
    """Configuration for the wallet bridge session client.

    The bridge is a local HTTP service that owns the WalletConnect pairing
    and forwards signing requests to the paired wallet.
    """

    token: SecretStr
    api_base_url: str = "http://127.0.0.1:8787"
    network: str = "testnet"
