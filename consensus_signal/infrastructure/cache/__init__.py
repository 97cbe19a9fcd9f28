"""Local caches for consensus-signal."""

from consensus_signal.infrastructure.cache.block_clock import (
    DEFAULT_CONFIRMATIONS,
    BlockClock,
    ClockEntry,
)

__all__: list[str] = ["DEFAULT_CONFIRMATIONS", "BlockClock", "ClockEntry"]
