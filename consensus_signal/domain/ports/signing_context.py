"""Signing context port.

The signing context is whatever holds key material and knows which
public key belongs to which alias. The signable message never touches
keys itself; it builds the canonical bytes and hands them over.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class SignatureResult:
    """Result of a signing operation.

    Attributes:
        signature: Hex-encoded signature.
        alias: Alias of the signer whose key produced the signature.
    """

    signature: str
    alias: str


@runtime_checkable
class SigningContextProtocol(Protocol):
    """Protocol for signing and verifying message content by alias."""

    async def sign(self, content: bytes) -> SignatureResult:
        """Sign content with the context's active key.

        Args:
            content: Canonical bytes to sign.

        Returns:
            SignatureResult with the signature and signer alias.
        """
        ...

    async def verify(self, content: bytes, signature: str, alias: str) -> bool:
        """Verify a signature against the current key of an alias.

        Args:
            content: Canonical bytes that were signed.
            signature: Hex-encoded signature.
            alias: Alias claimed as signer.

        Returns:
            True if the signature is valid, False otherwise.
        """
        ...

    def verify_sync(
        self,
        content: bytes,
        signature: str,
        alias: str,
        block_number: int | None = None,
    ) -> bool:
        """Verify a signature synchronously, optionally at a given block.

        Args:
            content: Canonical bytes that were signed.
            signature: Hex-encoded signature.
            alias: Alias claimed as signer.
            block_number: If given, only keys active at this block count.

        Returns:
            True if the signature is valid, False otherwise.
        """
        ...
