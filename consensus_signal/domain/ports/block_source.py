"""Block source ports for signal location.

A signal is anchored to a block hash. To learn where that block actually
sits (its number and timestamp) the signal asks a block source. Two kinds
exist:

- ChainAccessProtocol: authoritative, asynchronous, queries a live node.
- LocalClockProtocol: fast, synchronous, reads a cached block-hash index
  that may lag behind the chain.

Both answer None when the block is unknown. That is a legitimate
transient state (block not yet seen or not yet confirmed), not a fault.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class BlockInfo:
    """Resolved coordinates of a block.

    Attributes:
        block_number: Height of the block.
        timestamp: Block timestamp in Unix seconds.
    """

    block_number: int
    timestamp: int


@runtime_checkable
class ChainAccessProtocol(Protocol):
    """Protocol for reading block info from a live chain."""

    async def get_block_info(self, block_hash: str) -> BlockInfo | None:
        """Fetch number and timestamp of the block with the given hash.

        Args:
            block_hash: Hex-encoded block hash.

        Returns:
            BlockInfo if the node knows the block, None otherwise.

        Raises:
            ChainAccessError: If the node answered with an error.
        """
        ...


@runtime_checkable
class LocalClockProtocol(Protocol):
    """Protocol for reading block info from a locally cached clock."""

    def read_hash(self, block_hash: str, confirm: bool = False) -> BlockInfo | None:
        """Look up a block hash in the local index.

        Args:
            block_hash: Hex-encoded block hash.
            confirm: If True, only confirmed blocks are eligible.

        Returns:
            BlockInfo if the block is indexed (and confirmed, when
            requested), None otherwise.
        """
        ...
