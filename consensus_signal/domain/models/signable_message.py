"""Signable message envelope.

A SignableMessage holds two mappings:
- signed: the data covered by the signature
- params: unsigned metadata (signature, signer alias, location, ...)

Signing produces canonical bytes from a typed domain separator plus the
signed mapping and hands them to a signing context. Callers may add
extra domain fields (a Signal adds its world name), which binds the
signature to that domain: the same signed data under a different domain
produces different bytes and will not verify.

Canonical encoding (stable across implementations):
- JSON with sorted keys, no whitespace, UTF-8
- {"domain": [{"name", "type", "value"}, ...], "message": signed}

A newly created message gets a time-ordered UUIDv7 identity, stored in
the signed mapping so it survives serialization. A received payload is
never modified: its identity is the stored uuid if present, otherwise a
name-based UUID derived from the canonical signed content, so every
copy of the same wire payload has the same identity. Comparing
identities gives a deterministic tiebreak between otherwise equal
messages.
"""

from __future__ import annotations

import json
import uuid as uuidlib
from collections.abc import Iterable, Mapping
from dataclasses import asdict, dataclass
from typing import Any

from uuid6 import uuid7

from consensus_signal.domain.errors.signing import (
    MissingSignatureError,
    SignatureVerificationError,
)
from consensus_signal.domain.ports.signing_context import SigningContextProtocol

UUID_KEY = "uuid"
CONTENT_ID_NAMESPACE = uuidlib.NAMESPACE_OID


def canonical_json(value: Any) -> str:
    """Encode a value as sorted, compact, non-ASCII-escaped JSON."""
    return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


@dataclass(frozen=True)
class DomainField:
    """One typed field of a signing domain separator.

    Attributes:
        name: Field name.
        type: Field type label (e.g. "string").
        value: Field value.
    """

    name: str
    type: str
    value: Any


BASE_DOMAIN_FIELDS: tuple[DomainField, ...] = (
    DomainField(name="version", type="string", value="1"),
)


class SignableMessage:
    """Generic signed envelope with unsigned params.

    Attributes:
        signed: Data covered by the signature.
        params: Unsigned metadata. 'sig' and 'alias' are written on sign.
    """

    def __init__(self, payload: Mapping[str, Any] | None = None) -> None:
        """Initialize from an optional wire payload.

        A payload without '_signed_' starts a new message and mints its
        identity. A received '_signed_' mapping is kept exactly as given.

        Args:
            payload: Mapping with optional '_signed_' and '_params_' keys.
        """
        payload = payload or {}
        self.signed: dict[str, Any] = dict(payload.get("_signed_") or {})
        self.params: dict[str, Any] = dict(payload.get("_params_") or {})
        if "_signed_" not in payload:
            self.mint_uuid()
        self._author_alias: str | None = None

    @property
    def uuid(self) -> str:
        """Identity of this message.

        The stored uuid if there is one, otherwise a UUIDv5 of the
        canonical signed content.
        """
        if UUID_KEY in self.signed:
            return str(self.signed[UUID_KEY])
        return str(uuidlib.uuid5(CONTENT_ID_NAMESPACE, canonical_json(self.signed)))

    def mint_uuid(self) -> str:
        """Store a fresh UUIDv7 identity unless one is already present."""
        return str(self.signed.setdefault(UUID_KEY, str(uuid7())))

    @property
    def keys(self) -> list[str]:
        """Signed keys, excluding the reserved identity key."""
        return [key for key in self.signed if key != UUID_KEY]

    @property
    def author_alias(self) -> str | None:
        """Alias confirmed by the last successful verification."""
        return self._author_alias

    @property
    def payload(self) -> dict[str, Any]:
        """Wire form of the message."""
        return {"_signed_": dict(self.signed), "_params_": dict(self.params)}

    def signable_content(self, extra_domain_fields: Iterable[DomainField] = ()) -> bytes:
        """Build the canonical bytes covered by the signature.

        Args:
            extra_domain_fields: Fields appended to the base domain.

        Returns:
            Canonical UTF-8 JSON bytes.
        """
        domain = [asdict(f) for f in (*BASE_DOMAIN_FIELDS, *extra_domain_fields)]
        return canonical_json({"domain": domain, "message": self.signed}).encode("utf-8")

    async def sign(
        self,
        context: SigningContextProtocol,
        extra_domain_fields: Iterable[DomainField] = (),
    ) -> dict[str, Any]:
        """Sign the message and record 'sig' and 'alias' params.

        Args:
            context: Signing context holding the author's key.
            extra_domain_fields: Fields appended to the base domain.

        Returns:
            The signed wire payload.
        """
        content = self.signable_content(extra_domain_fields)
        result = await context.sign(content)
        self.params["sig"] = result.signature
        self.params["alias"] = result.alias
        self._author_alias = result.alias
        return self.payload

    async def verify(
        self,
        context: SigningContextProtocol,
        extra_domain_fields: Iterable[DomainField] = (),
    ) -> SignableMessage:
        """Verify the signature against the alias's current key.

        Args:
            context: Signing context able to resolve the alias's key.
            extra_domain_fields: Fields appended to the base domain.

        Returns:
            self, with author_alias set.

        Raises:
            MissingSignatureError: If 'sig' or 'alias' is absent.
            SignatureVerificationError: If the signature is rejected.
        """
        signature, alias = self._require_signature()
        content = self.signable_content(extra_domain_fields)
        if not await context.verify(content, signature, alias):
            raise SignatureVerificationError(alias)
        self._author_alias = alias
        return self

    def verify_sync(
        self,
        context: SigningContextProtocol,
        block_number: int | None = None,
        extra_domain_fields: Iterable[DomainField] = (),
    ) -> SignableMessage:
        """Verify the signature synchronously, optionally at a block.

        Args:
            context: Signing context able to resolve the alias's key.
            block_number: If given, the key must be active at this block.
            extra_domain_fields: Fields appended to the base domain.

        Returns:
            self, with author_alias set.

        Raises:
            MissingSignatureError: If 'sig' or 'alias' is absent.
            SignatureVerificationError: If the signature is rejected.
        """
        signature, alias = self._require_signature()
        content = self.signable_content(extra_domain_fields)
        if not context.verify_sync(content, signature, alias, block_number):
            raise SignatureVerificationError(alias, block_number)
        self._author_alias = alias
        return self

    def compare(self, other: SignableMessage) -> int:
        """Order two messages by creation identity.

        Returns:
            Negative, zero or positive. Zero only for the same identity.
        """
        return (self.uuid > other.uuid) - (self.uuid < other.uuid)

    def _require_signature(self) -> tuple[str, str]:
        signature = self.params.get("sig")
        if not signature:
            raise MissingSignatureError("sig")
        alias = self.params.get("alias")
        if not alias:
            raise MissingSignatureError("alias")
        return str(signature), str(alias)
