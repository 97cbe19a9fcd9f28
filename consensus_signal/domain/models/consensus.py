"""Consensus string codec.

The consensus string is the one value a signal author actually signs:

    "{sender} > {action} > {epoch} > {block}"

Segment order reads "who > what > where > when" and is part of the
signed contract. Reordering the segments changes every signature ever
made over them, so the order is fixed here and nowhere else.
"""

from __future__ import annotations

from dataclasses import astuple, dataclass
from typing import Any

from consensus_signal.domain.errors.signal import MalformedConsensusError

CONSENSUS_SEPARATOR = " > "
CONSENSUS_FIELDS: tuple[str, ...] = ("sender", "action", "epoch", "block")


@dataclass(frozen=True)
class ConsensusClaim:
    """The four coordinates encoded in a consensus string.

    Attributes:
        sender: Alias of the claimed author.
        action: Name of the intended operation.
        epoch: Logical consensus round.
        block: Anchor block hash.
    """

    sender: str
    action: str
    epoch: str
    block: str

    def to_consensus(self) -> str:
        """Compose this claim into its consensus string."""
        return compose_consensus(*astuple(self))


def compose_consensus(sender: Any, action: Any, epoch: Any, block: Any) -> str:
    """Join the four claim fields into a consensus string.

    Args:
        sender: Alias of the claimed author.
        action: Name of the intended operation.
        epoch: Logical consensus round (numbers are stringified).
        block: Anchor block hash.

    Returns:
        The consensus string.

    Raises:
        MalformedConsensusError: If a field contains the separator, since
            the result could never be parsed back into the same fields.
    """
    values = [str(value) for value in (sender, action, epoch, block)]
    for name, value in zip(CONSENSUS_FIELDS, values):
        if CONSENSUS_SEPARATOR in value:
            raise MalformedConsensusError(
                value, reason=f"field '{name}' contains separator {CONSENSUS_SEPARATOR!r}"
            )
    return CONSENSUS_SEPARATOR.join(values)


def parse_consensus(consensus: str) -> ConsensusClaim:
    """Split a consensus string back into its four fields.

    Args:
        consensus: The signed consensus string.

    Returns:
        ConsensusClaim with the four segments, in order.

    Raises:
        MalformedConsensusError: If the string is not a str or does not
            have exactly four segments.
    """
    if not isinstance(consensus, str):
        raise MalformedConsensusError(repr(consensus), reason="not a string")

    segments = consensus.split(CONSENSUS_SEPARATOR)
    if len(segments) != len(CONSENSUS_FIELDS):
        raise MalformedConsensusError(
            consensus,
            reason=f"expected {len(CONSENSUS_FIELDS)} segments, got {len(segments)}",
        )

    return ConsensusClaim(*segments)
