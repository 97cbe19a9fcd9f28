"""Signing context stub implementation.

This module provides a stub implementation of SigningContextProtocol
for development and testing purposes. It performs no cryptography.

- sign() returns a deterministic fake signature and the configured alias
- verify()/verify_sync() return the accept_all setting
"""

from __future__ import annotations

import hashlib

from consensus_signal.domain.ports.signing_context import SignatureResult


class SigningContextStub:
    """Stub implementation of SigningContextProtocol.

    Attributes:
        alias: Alias reported as signer.
        accept_all: Whether verification accepts every signature.
        verified_blocks: block_number arguments seen by verify_sync().
    """

    def __init__(self, alias: str = "stub-author", accept_all: bool = True) -> None:
        """Initialize the stub.

        Args:
            alias: Alias reported as signer.
            accept_all: If True, all signatures are accepted.
                       If False, all signatures are rejected.
        """
        self.alias = alias
        self.accept_all = accept_all
        self.signed_content: list[bytes] = []
        self.verified_blocks: list[int | None] = []

    async def sign(self, content: bytes) -> SignatureResult:
        """Return a fake signature derived from the content."""
        self.signed_content.append(content)
        return SignatureResult(signature=hashlib.sha256(content).hexdigest(), alias=self.alias)

    async def verify(self, content: bytes, signature: str, alias: str) -> bool:
        return self.accept_all

    def verify_sync(
        self,
        content: bytes,
        signature: str,
        alias: str,
        block_number: int | None = None,
    ) -> bool:
        self.verified_blocks.append(block_number)
        return self.accept_all

    def set_accept_all(self, accept_all: bool) -> None:
        """Configure whether to accept all signatures."""
        self.accept_all = accept_all
