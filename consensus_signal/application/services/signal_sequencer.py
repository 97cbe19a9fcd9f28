"""Signal sequencing service.

Takes a batch of signals, locates each one, and returns the located
signals in signal order. Signals whose anchor block could not be found
are returned separately as pending instead of being dropped, so the
caller can try again once the block is known or confirmed.

Each signal is located exactly once per call; there is no retry.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from dataclasses import dataclass, field

from structlog import get_logger

from consensus_signal.domain.models.signal import Signal
from consensus_signal.domain.ports.block_source import ChainAccessProtocol, LocalClockProtocol
from consensus_signal.domain.services.signal_ordering import sort_signals

logger = get_logger()


@dataclass
class SequenceResult:
    """Outcome of sequencing a batch.

    Attributes:
        ordered: Located signals, in ascending signal order.
        pending: Signals whose anchor block was not found.
    """

    ordered: list[Signal] = field(default_factory=list)
    pending: list[Signal] = field(default_factory=list)


class SignalSequencer:
    """Locates and orders batches of signals.

    Example:
        >>> sequencer = SignalSequencer(chain=chain_client)
        >>> result = await sequencer.sequence(signals)
        >>> [s.consensus for s in result.ordered]
    """

    def __init__(
        self,
        chain: ChainAccessProtocol | None = None,
        clock: LocalClockProtocol | None = None,
    ) -> None:
        """Initialize the sequencer.

        Args:
            chain: Chain access used by sequence().
            clock: Local clock used by sequence_sync().
        """
        self._chain = chain
        self._clock = clock

    async def sequence(self, signals: Iterable[Signal]) -> SequenceResult:
        """Locate signals against the chain and order them.

        Raises:
            MissingCollaboratorError: If no chain was configured.
            MissingAnchorError: If a signal has no block.
        """
        batch = list(signals)
        await asyncio.gather(*(signal.locate(self._chain) for signal in batch))
        return self._partition(batch, source="chain")

    def sequence_sync(self, signals: Iterable[Signal], confirm: bool = False) -> SequenceResult:
        """Locate signals against the local clock and order them.

        Args:
            signals: Signals to sequence.
            confirm: If True, only confirmed blocks locate a signal.

        Raises:
            MissingCollaboratorError: If no clock was configured.
            MissingAnchorError: If a signal has no block.
        """
        batch = list(signals)
        for signal in batch:
            signal.locate_sync(self._clock, confirm)
        return self._partition(batch, source="clock")

    def _partition(self, batch: list[Signal], source: str) -> SequenceResult:
        located = [signal for signal in batch if signal.located]
        pending = [signal for signal in batch if not signal.located]
        result = SequenceResult(ordered=sort_signals(located), pending=pending)
        logger.info(
            "signals_sequenced",
            source=source,
            ordered_count=len(result.ordered),
            pending_count=len(result.pending),
        )
        return result
