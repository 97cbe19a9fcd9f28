"""Ed25519 signing context.

Implements SigningContextProtocol with the `cryptography` package.
The context owns one private key (the local author) and a keyring that
maps aliases to public keys with block-height validity windows, so a
signature can be checked against the key an alias held at a given
block.

Keys are never deleted from the keyring. Rotating a key closes the old
key's window (active_until_block) and registers the new one.
"""

from __future__ import annotations

from dataclasses import dataclass

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from structlog import get_logger

from consensus_signal.domain.ports.signing_context import SignatureResult

logger = get_logger()


@dataclass(frozen=True)
class RegisteredKey:
    """A public key bound to an alias for a range of blocks.

    Attributes:
        alias: Alias the key belongs to.
        public_key: Raw 32-byte Ed25519 public key.
        active_from_block: First block at which the key is valid.
        active_until_block: Last block at which the key is valid
            (None = still active).
    """

    alias: str
    public_key: bytes
    active_from_block: int = 0
    active_until_block: int | None = None

    def is_current(self) -> bool:
        return self.active_until_block is None

    def is_active_at(self, block_number: int) -> bool:
        if block_number < self.active_from_block:
            return False
        return self.active_until_block is None or block_number <= self.active_until_block


class Ed25519SigningContext:
    """Signing context backed by Ed25519 keys."""

    def __init__(
        self,
        alias: str,
        private_key: Ed25519PrivateKey | None = None,
        active_from_block: int = 0,
    ) -> None:
        """Initialize the context and register its own public key.

        Args:
            alias: Alias of the local author.
            private_key: Signing key. A new one is generated if None.
            active_from_block: First block at which the key is valid.
        """
        self._alias = alias
        self._private_key = private_key or Ed25519PrivateKey.generate()
        self._keyring: dict[str, list[RegisteredKey]] = {}
        self.register_key(alias, self.public_key_bytes, active_from_block)

    @property
    def alias(self) -> str:
        return self._alias

    @property
    def public_key_bytes(self) -> bytes:
        """Raw public key of the local author."""
        return self._private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def register_key(
        self,
        alias: str,
        public_key: bytes,
        active_from_block: int = 0,
        active_until_block: int | None = None,
    ) -> RegisteredKey:
        """Add a public key for an alias to the keyring.

        Args:
            alias: Alias the key belongs to.
            public_key: Raw 32-byte Ed25519 public key.
            active_from_block: First block at which the key is valid.
            active_until_block: Last valid block, None if still active.

        Returns:
            The registered key.
        """
        key = RegisteredKey(
            alias=alias,
            public_key=public_key,
            active_from_block=active_from_block,
            active_until_block=active_until_block,
        )
        self._keyring.setdefault(alias, []).append(key)
        logger.debug(
            "signing_key_registered",
            alias=alias,
            active_from_block=active_from_block,
            active_until_block=active_until_block,
        )
        return key

    def keys_for(self, alias: str, block_number: int | None = None) -> list[RegisteredKey]:
        """Return the keys valid for an alias now, or at a given block."""
        keys = self._keyring.get(alias, [])
        if block_number is None:
            return [key for key in keys if key.is_current()]
        return [key for key in keys if key.is_active_at(block_number)]

    async def sign(self, content: bytes) -> SignatureResult:
        """Sign content with the local author's key."""
        signature = self._private_key.sign(content)
        return SignatureResult(signature=signature.hex(), alias=self._alias)

    async def verify(self, content: bytes, signature: str, alias: str) -> bool:
        """Verify against the alias's currently active keys."""
        return self._verify(content, signature, self.keys_for(alias))

    def verify_sync(
        self,
        content: bytes,
        signature: str,
        alias: str,
        block_number: int | None = None,
    ) -> bool:
        """Verify against the alias's keys active at block_number."""
        return self._verify(content, signature, self.keys_for(alias, block_number))

    def _verify(self, content: bytes, signature: str, keys: list[RegisteredKey]) -> bool:
        try:
            signature_bytes = bytes.fromhex(signature)
        except ValueError:
            return False

        for key in keys:
            try:
                Ed25519PublicKey.from_public_bytes(key.public_key).verify(
                    signature_bytes, content
                )
            except InvalidSignature:
                continue
            return True

        return False
