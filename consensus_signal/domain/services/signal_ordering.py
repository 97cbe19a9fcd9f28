"""Signal ordering domain service.

Located signals form a strict total order:

1. blockNumber ascending, when both signals have one
2. otherwise timestamp ascending
3. on equal keys, the message identity (creation UUIDv7) decides

Signals that are not located cannot be ordered; comparing them raises.

Note: This is pure domain logic with no infrastructure dependencies.
"""

from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key
from typing import TYPE_CHECKING

from consensus_signal.domain.errors.signal import NotLocatedError

if TYPE_CHECKING:
    from consensus_signal.domain.models.signal import Signal


def compare_signals(a: Signal, b: Signal) -> int:
    """Compare two located signals.

    Args:
        a: First signal.
        b: Second signal.

    Returns:
        Negative if a sorts first, positive if b does, zero only when
        both are the same message.

    Raises:
        NotLocatedError: If either signal is unlocated, or if they share
            no location key (one has only blockNumber, the other only
            timestamp).
    """
    if not (a.located and b.located):
        raise NotLocatedError()

    i0, i1 = a.block_number, b.block_number

    if i0 is None or i1 is None:
        i0, i1 = a.timestamp, b.timestamp

    if i0 is None or i1 is None:
        raise NotLocatedError(
            "Cannot compare signals located by different params "
            "(blockNumber on one, timestamp on the other)"
        )

    if i0 == i1:
        return a.message.compare(b.message)

    return (i0 > i1) - (i0 < i1)


signal_sort_key = cmp_to_key(compare_signals)


def sort_signals(signals: Iterable[Signal]) -> list[Signal]:
    """Return located signals in ascending signal order.

    Raises:
        NotLocatedError: If any signal is unlocated.
    """
    return sorted(signals, key=signal_sort_key)
