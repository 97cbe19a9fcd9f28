"""Chain access stub implementation.

In-memory implementation of ChainAccessProtocol for development and
testing. Blocks are injected with add_block(); unknown hashes return
None exactly like a node that has not seen the block.
"""

from __future__ import annotations

from consensus_signal.domain.ports.block_source import BlockInfo


class ChainAccessStub:
    """Stub implementation of ChainAccessProtocol.

    Attributes:
        requests: Block hashes requested, in call order.
    """

    def __init__(self, blocks: dict[str, BlockInfo] | None = None) -> None:
        """Initialize the stub.

        Args:
            blocks: Initial block hash -> BlockInfo mapping.
        """
        self._blocks: dict[str, BlockInfo] = dict(blocks or {})
        self.requests: list[str] = []

    def add_block(self, block_hash: str, block_number: int, timestamp: int) -> None:
        """Make a block known to the stub."""
        self._blocks[block_hash] = BlockInfo(block_number=block_number, timestamp=timestamp)

    def remove_block(self, block_hash: str) -> None:
        """Forget a block (e.g. simulate a reorg)."""
        self._blocks.pop(block_hash, None)

    async def get_block_info(self, block_hash: str) -> BlockInfo | None:
        """Return the injected block, or None if unknown."""
        self.requests.append(block_hash)
        return self._blocks.get(block_hash)
