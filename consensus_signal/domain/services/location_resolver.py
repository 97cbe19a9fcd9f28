"""Signal location resolver.

A signal signs a block hash (its anchor). Locating the signal means
looking up that hash to learn the block's number and timestamp, then
recording them as the signal's blockNumber and timestamp params.

There is one resolution pipeline with two entrypoints, differing only
in where block info comes from:
- locate(): awaits a live chain node (slow, authoritative)
- locate_sync(): reads a local block clock (fast, possibly stale)

Either way the signal ends fully located (both params set) or fully
unlocated (both cleared). A lookup that finds nothing clears the
location and hands back the now-unlocated signal instead of raising; the block may simply not be confirmed yet.
There is no retry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from structlog import get_logger

from consensus_signal.domain.errors.signal import MissingAnchorError, MissingCollaboratorError
from consensus_signal.domain.ports.block_source import (
    BlockInfo,
    ChainAccessProtocol,
    LocalClockProtocol,
)

if TYPE_CHECKING:
    from consensus_signal.domain.models.signal import Signal

logger = get_logger()


class LocationResolver:
    """Resolves a signal's anchor block into blockNumber and timestamp."""

    async def locate(
        self,
        signal: Signal,
        chain: ChainAccessProtocol | None,
    ) -> dict[str, int] | Signal:
        """Locate a signal using a live chain node.

        Args:
            signal: The signal to locate.
            chain: Chain access collaborator.

        Returns:
            {'blockNumber', 'timestamp'} if the block was found,
            the signal itself if it was not (location cleared).

        Raises:
            MissingCollaboratorError: If chain is None.
            MissingAnchorError: If the signal has no block.
            ChainAccessError: If the node answered with an error.
        """
        if chain is None:
            raise MissingCollaboratorError("chain access client")
        info = await chain.get_block_info(self._require_anchor(signal))
        return self._apply(signal, info, source="chain")

    def locate_sync(
        self,
        signal: Signal,
        clock: LocalClockProtocol | None,
        confirm: bool = False,
    ) -> dict[str, int] | Signal:
        """Locate a signal using a local block clock.

        Args:
            signal: The signal to locate.
            clock: Local clock collaborator.
            confirm: If True, only confirmed blocks are eligible.

        Returns:
            Same as locate().

        Raises:
            MissingCollaboratorError: If clock is None.
            MissingAnchorError: If the signal has no block.
        """
        if clock is None:
            raise MissingCollaboratorError("local clock")
        info = clock.read_hash(self._require_anchor(signal), confirm)
        return self._apply(signal, info, source="clock")

    def _require_anchor(self, signal: Signal) -> str:
        if signal.block is None:
            raise MissingAnchorError()
        return signal.block

    def _apply(
        self,
        signal: Signal,
        info: BlockInfo | None,
        source: str,
    ) -> dict[str, int] | Signal:
        if info is None:
            signal.clear_location()
            logger.debug(
                "signal_location_cleared",
                block=signal.block,
                source=source,
                uuid=signal.uuid,
            )
            return signal

        location = {"blockNumber": info.block_number, "timestamp": info.timestamp}
        signal.add_params(location)
        logger.debug(
            "signal_located",
            block=signal.block,
            source=source,
            uuid=signal.uuid,
            block_number=info.block_number,
            block_timestamp=info.timestamp,
        )
        return location
