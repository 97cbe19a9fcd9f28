"""Signing-related domain exceptions.

These exceptions are raised by the signable message envelope when a
signature is missing or is rejected by the signing context.
"""

from consensus_signal.domain.exceptions import SignalError


class SigningError(SignalError):
    """Base exception for signing and verification errors."""

    pass


class MissingSignatureError(SigningError):
    """Raised when verification is attempted on an unsigned message.

    Both the 'sig' and 'alias' params must be present before a
    signature can be checked.
    """

    def __init__(self, missing: str = "sig") -> None:
        """Initialize with the name of the absent param.

        Args:
            missing: The param that was absent ('sig' or 'alias').
        """
        self.missing = missing
        super().__init__(f"Cannot verify message without '{missing}' param")


class SignatureVerificationError(SigningError):
    """Raised when the signing context rejects a signature.

    Attributes:
        alias: The alias the signature was checked against.
    """

    def __init__(self, alias: str, block_number: int | None = None) -> None:
        """Initialize with verification details.

        Args:
            alias: The alias the signature was checked against.
            block_number: Block at which the key was resolved, if any.
        """
        self.alias = alias
        self.block_number = block_number
        message = f"Signature verification failed for alias '{alias}'"
        if block_number is not None:
            message = f"{message} at block {block_number}"
        super().__init__(message)
