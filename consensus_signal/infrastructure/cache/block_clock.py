"""Local block clock.

An in-memory index of block hash -> (number, timestamp) that answers
location lookups without a network round trip. Whoever follows the
chain feeds it with record_block(); this module does not sync anything.

A block counts as confirmed once `confirmations` blocks (itself
included) exist at or above it: head - number + 1 >= confirmations.
"""

from __future__ import annotations

from dataclasses import dataclass

import structlog

from consensus_signal.domain.ports.block_source import BlockInfo

logger = structlog.get_logger(__name__)

DEFAULT_CONFIRMATIONS = 12


@dataclass(frozen=True)
class ClockEntry:
    """Indexed block.

    Attributes:
        block_hash: Hex-encoded block hash (stored lowercase).
        number: Block height.
        timestamp: Block timestamp in Unix seconds.
    """

    block_hash: str
    number: int
    timestamp: int


class BlockClock:
    """In-memory block-hash index implementing LocalClockProtocol."""

    def __init__(self, confirmations: int = DEFAULT_CONFIRMATIONS) -> None:
        """Initialize an empty clock.

        Args:
            confirmations: Blocks required for a block to count as
                confirmed. Must be at least 1.

        Raises:
            ValueError: If confirmations < 1.
        """
        if confirmations < 1:
            raise ValueError(f"confirmations must be >= 1, got {confirmations}")
        self._confirmations = confirmations
        self._entries: dict[str, ClockEntry] = {}
        self._head: int | None = None

    @property
    def confirmations(self) -> int:
        return self._confirmations

    @property
    def head(self) -> int | None:
        """Highest block number recorded so far."""
        return self._head

    def __len__(self) -> int:
        return len(self._entries)

    def record_block(self, block_hash: str, number: int, timestamp: int) -> None:
        """Index a block.

        Args:
            block_hash: Hex-encoded block hash.
            number: Block height.
            timestamp: Block timestamp in Unix seconds.
        """
        key = block_hash.lower()
        self._entries[key] = ClockEntry(block_hash=key, number=number, timestamp=timestamp)
        if self._head is None or number > self._head:
            self._head = number
        logger.debug("block_recorded", block_hash=key, number=number, head=self._head)

    def is_confirmed(self, number: int) -> bool:
        """Check whether a block height has enough confirmations."""
        if self._head is None:
            return False
        return self._head - number + 1 >= self._confirmations

    def read_hash(self, block_hash: str, confirm: bool = False) -> BlockInfo | None:
        """Look up a block by hash.

        Args:
            block_hash: Hex-encoded block hash (case-insensitive).
            confirm: If True, unconfirmed blocks are treated as unknown.

        Returns:
            BlockInfo, or None if unknown (or unconfirmed when confirm).
        """
        entry = self._entries.get(block_hash.lower())
        if entry is None:
            return None
        if confirm and not self.is_confirmed(entry.number):
            return None
        return BlockInfo(block_number=entry.number, timestamp=entry.timestamp)
