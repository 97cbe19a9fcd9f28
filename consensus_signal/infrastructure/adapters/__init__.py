"""Infrastructure adapters implementing domain ports."""

from consensus_signal.infrastructure.adapters.chain_rpc_client import ChainRpcClient
from consensus_signal.infrastructure.adapters.ed25519_signing_context import (
    Ed25519SigningContext,
    RegisteredKey,
)

__all__: list[str] = [
    "ChainRpcClient",
    "Ed25519SigningContext",
    "RegisteredKey",
]
