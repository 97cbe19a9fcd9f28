"""Signal entity.

A Signal is a signed consensus message encoding a claimed state
transition: who did what, in which epoch, anchored to which block.

    signal = Signal(claim={
        "sender": "alice",
        "action": "vote",
        "epoch": "3",
        "block": "0xaa",
        "world": "earth",
    })
    signal.consensus  # "alice > vote > 3 > 0xaa"
    await signal.sign(context)
    await signal.locate(chain)

The signal contains a SignableMessage and delegates signing and
verification to it, adding the world name to the domain separator so a
signature made in one world cannot be replayed in another.

Invariants:
- sender/action/epoch/block are set once, from the claim or by parsing
  the consensus string, and always agree with the consensus string.
- The consensus string is never rewritten after construction.
- located is True iff timestamp or blockNumber is set.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from consensus_signal.domain.errors.signal import (
    MissingRequiredParamError,
    MissingSenderError,
    SenderMismatchError,
)
from consensus_signal.domain.models.consensus import (
    CONSENSUS_FIELDS,
    ConsensusClaim,
    parse_consensus,
)
from consensus_signal.domain.models.signable_message import DomainField, SignableMessage
from consensus_signal.domain.models.signal_params import SignalParams
from consensus_signal.domain.ports.block_source import ChainAccessProtocol, LocalClockProtocol
from consensus_signal.domain.ports.signing_context import SigningContextProtocol
from consensus_signal.domain.services.location_resolver import LocationResolver
from consensus_signal.domain.services.signal_ordering import compare_signals

CONSENSUS_KEY = "@"
OPTIONAL_CLAIM_PARAMS: tuple[str, ...] = ("blockNumber", "timestamp", "world")

_resolver = LocationResolver()


class Signal:
    """Signed consensus message with unsigned, mutable params."""

    def __init__(
        self,
        payload: Mapping[str, Any] | None = None,
        claim: Mapping[str, Any] | None = None,
    ) -> None:
        """Create a signal from a claim or from a received payload.

        Args:
            payload: Wire payload {'_signed_': {...}, '_params_': {...}}.
            claim: Construction input {sender, action, epoch, block,
                blockNumber?, timestamp?, world?}. When given, the
                consensus string is composed from it.

        Raises:
            MissingRequiredParamError: If claim lacks a mandatory field.
            MalformedConsensusError: If a claim field contains the
                separator, or a payload's consensus string does not
                have exactly four segments.
        """
        self._message = SignableMessage(payload)
        self._params = SignalParams(self._message.params)
        self._claim: ConsensusClaim | None = None

        if claim is not None:
            for field in CONSENSUS_FIELDS:
                value = claim.get(field)
                if value is None or str(value) == "":
                    raise MissingRequiredParamError(field)

            self._claim = ConsensusClaim(*(str(claim[field]) for field in CONSENSUS_FIELDS))

            for coord in OPTIONAL_CLAIM_PARAMS:
                if claim.get(coord) is not None:
                    self._params.add({coord: claim[coord]})

            self._message.mint_uuid()
            self._message.signed[CONSENSUS_KEY] = self._claim.to_consensus()

        elif self.consensus is not None:
            self._claim = parse_consensus(self.consensus)

    def __repr__(self) -> str:
        return f"Signal({self.consensus!r}, uuid={self.uuid!r})"

    # Claim fields

    @property
    def sender(self) -> str | None:
        return self._claim.sender if self._claim else None

    @property
    def action(self) -> str | None:
        return self._claim.action if self._claim else None

    @property
    def epoch(self) -> str | None:
        return self._claim.epoch if self._claim else None

    @property
    def block(self) -> str | None:
        return self._claim.block if self._claim else None

    @property
    def consensus(self) -> str | None:
        """The exact string that was (or will be) signed."""
        return self._message.signed.get(CONSENSUS_KEY)

    @property
    def contained(self) -> dict[str, Any]:
        """Signed data other than the consensus string."""
        return {
            key: self._message.signed[key]
            for key in self._message.keys
            if key != CONSENSUS_KEY
        }

    # Envelope

    @property
    def message(self) -> SignableMessage:
        return self._message

    @property
    def uuid(self) -> str:
        return self._message.uuid

    @property
    def author_alias(self) -> str | None:
        return self._message.author_alias

    @property
    def payload(self) -> dict[str, Any]:
        """Wire form: signed data plus the standard params that are set."""
        return {
            "_signed_": dict(self._message.signed),
            "_params_": {
                key: value for key, value in self.standard_params.items() if value is not None
            },
        }

    # Params

    @property
    def params(self) -> SignalParams:
        return self._params

    @property
    def standard_params(self) -> dict[str, Any]:
        return self._params.standard

    @property
    def custom_params(self) -> dict[str, Any]:
        return self._params.custom

    def add_params(self, params: Mapping[str, Any]) -> None:
        """Merge unsigned params; signed data is never affected."""
        self._params.add(params)

    def clear_custom_params(self) -> None:
        self._params.clear_custom()

    def clear_location(self) -> None:
        self._params.clear_location()

    @property
    def world(self) -> str | None:
        return self._params.get("world")

    @property
    def sig(self) -> str | None:
        return self._params.get("sig")

    @property
    def alias(self) -> str | None:
        return self._params.get("alias")

    @property
    def block_number(self) -> int | None:
        return self._params.get_int("blockNumber")

    @property
    def timestamp(self) -> int | None:
        return self._params.get_int("timestamp")

    @property
    def dropped(self) -> int | None:
        """Block at which the signal was dropped, if a ledger marked it."""
        return self._params.get_int("dropped")

    @property
    def located(self) -> bool:
        return self.timestamp is not None or self.block_number is not None

    # Signing

    def _domain_fields(self) -> tuple[DomainField, ...]:
        return (DomainField(name="name", type="string", value=self.world),)

    async def sign(self, context: SigningContextProtocol) -> dict[str, Any]:
        """Sign the signal, binding the signature to its world.

        Args:
            context: Signing context holding the author's key.

        Returns:
            The signed message payload.
        """
        return await self._message.sign(context, self._domain_fields())

    async def verify(self, context: SigningContextProtocol) -> Signal:
        """Verify signature and that the declared sender signed it.

        Args:
            context: Signing context able to resolve the author's key.

        Returns:
            self.

        Raises:
            MissingSenderError: If sender is undefined.
            MissingSignatureError: If sig or alias is absent.
            SignatureVerificationError: If the signature is rejected.
            SenderMismatchError: If sender is not the verified author.
        """
        if self.sender is None:
            raise MissingSenderError()

        await self._message.verify(context, self._domain_fields())
        self._check_sender()
        return self

    def verify_sync(
        self,
        context: SigningContextProtocol,
        block_number: int | None = None,
    ) -> Signal:
        """Synchronous verify(), resolving the author's key at a block.

        Args:
            context: Signing context able to resolve the author's key.
            block_number: Block at which the author's key must be active.

        Returns:
            self.

        Raises:
            Same as verify().
        """
        if self.sender is None:
            raise MissingSenderError()

        self._message.verify_sync(context, block_number, self._domain_fields())
        self._check_sender()
        return self

    def _check_sender(self) -> None:
        if self.sender != self.author_alias:
            raise SenderMismatchError(self.sender or "", self.author_alias)

    # Location and ordering

    async def locate(self, chain: ChainAccessProtocol | None) -> dict[str, int] | Signal:
        """Resolve blockNumber and timestamp from the live chain.

        Returns:
            The merged location, or this signal (now unlocated) if the
            block was not found.
        """
        return await _resolver.locate(self, chain)

    def locate_sync(
        self,
        clock: LocalClockProtocol | None,
        confirm: bool = False,
    ) -> dict[str, int] | Signal:
        """Resolve blockNumber and timestamp from a local clock.

        Returns:
            Same as locate().
        """
        return _resolver.locate_sync(self, clock, confirm)

    def compare(self, other: Signal) -> int:
        """Order this signal against another located signal."""
        return compare_signals(self, other)


__all__ = ["CONSENSUS_KEY", "Signal"]
