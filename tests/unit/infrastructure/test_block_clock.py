"""Unit tests for the local BlockClock."""

from __future__ import annotations

import pytest

from consensus_signal.domain.ports.block_source import BlockInfo, LocalClockProtocol
from consensus_signal.infrastructure.cache.block_clock import DEFAULT_CONFIRMATIONS, BlockClock


class TestBlockClockCreation:
    def test_defaults(self) -> None:
        clock = BlockClock()

        assert clock.confirmations == DEFAULT_CONFIRMATIONS
        assert clock.head is None
        assert len(clock) == 0

    def test_rejects_zero_confirmations(self) -> None:
        with pytest.raises(ValueError):
            BlockClock(confirmations=0)

    def test_implements_local_clock(self) -> None:
        assert isinstance(BlockClock(), LocalClockProtocol)


class TestReadHash:
    def test_unknown_hash(self) -> None:
        assert BlockClock().read_hash("0xaa") is None

    def test_known_hash(self) -> None:
        clock = BlockClock()
        clock.record_block("0xAA", number=10, timestamp=100)

        assert clock.read_hash("0xaa") == BlockInfo(block_number=10, timestamp=100)
        assert clock.read_hash("0xAA") == BlockInfo(block_number=10, timestamp=100)

    def test_head_tracks_highest_block(self) -> None:
        clock = BlockClock()
        clock.record_block("0x02", number=2, timestamp=20)
        clock.record_block("0x01", number=1, timestamp=10)

        assert clock.head == 2

    def test_confirm_requires_depth(self) -> None:
        clock = BlockClock(confirmations=2)
        clock.record_block("0x01", number=1, timestamp=10)

        assert clock.read_hash("0x01", confirm=True) is None
        assert clock.read_hash("0x01", confirm=False) is not None

        clock.record_block("0x02", number=2, timestamp=20)

        assert clock.read_hash("0x01", confirm=True) == BlockInfo(block_number=1, timestamp=10)
        assert clock.read_hash("0x02", confirm=True) is None

    def test_single_confirmation_confirms_head(self) -> None:
        clock = BlockClock(confirmations=1)
        clock.record_block("0x01", number=1, timestamp=10)

        assert clock.is_confirmed(1)
        assert clock.read_hash("0x01", confirm=True) is not None
