"""Domain ports (abstract interfaces) for consensus-signal.

Infrastructure adapters and stubs implement these protocols.
"""

from consensus_signal.domain.ports.block_source import (
    BlockInfo,
    ChainAccessProtocol,
    LocalClockProtocol,
)
from consensus_signal.domain.ports.signing_context import (
    SignatureResult,
    SigningContextProtocol,
)

__all__: list[str] = [
    "BlockInfo",
    "ChainAccessProtocol",
    "LocalClockProtocol",
    "SignatureResult",
    "SigningContextProtocol",
]
