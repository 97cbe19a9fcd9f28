"""Infrastructure stubs for development and testing.

Available stubs:
- ChainAccessStub: In-memory block lookups, injectable blocks
- SigningContextStub: Fake signatures, configurable accept/reject

WARNING: These stubs are NOT for production use.
Production implementations are in consensus_signal/infrastructure/adapters/.
"""

from consensus_signal.infrastructure.stubs.chain_access_stub import ChainAccessStub
from consensus_signal.infrastructure.stubs.signing_context_stub import SigningContextStub

__all__: list[str] = [
    "ChainAccessStub",
    "SigningContextStub",
]
