"""Signal domain errors.

These exceptions are raised by the Signal entity, the consensus codec,
the location resolver and the signal comparator. None of them are caught
internally; every one propagates to the caller.

The one recovered condition in the signal lifecycle is a block lookup
that returns no data. That is translated into clearing the signal's
location and is never raised.
"""

from __future__ import annotations

from consensus_signal.domain.exceptions import SignalError


class MissingRequiredParamError(SignalError):
    """Raised when a claim is missing one of sender/action/epoch/block.

    Attributes:
        param: Name of the missing claim field.
    """

    def __init__(self, param: str) -> None:
        """Initialize with the missing parameter name.

        Args:
            param: Name of the missing claim field.
        """
        self.param = param
        super().__init__(f"Missing required signal param '{param}'")


class MissingCollaboratorError(SignalError):
    """Raised when no chain-access or clock source is given to locate()."""

    def __init__(self, collaborator: str = "block source") -> None:
        """Initialize with the kind of collaborator that was missing.

        Args:
            collaborator: Human-readable collaborator name.
        """
        self.collaborator = collaborator
        super().__init__(f"Must provide a {collaborator} to locate a signal")


class MissingAnchorError(SignalError):
    """Raised when location is attempted on a signal without a 'block'."""

    def __init__(self) -> None:
        super().__init__("Cannot locate if signal 'block' is undefined")


class MissingSenderError(SignalError):
    """Raised when verification is attempted on a signal without a 'sender'."""

    def __init__(self) -> None:
        super().__init__("Cannot verify if signal 'sender' is undefined")


class SenderMismatchError(SignalError):
    """Raised when the declared sender is not the verified author alias.

    The signature itself was valid; the payload simply claims a
    different signer than the one who actually signed it.

    Attributes:
        sender: The sender declared in the consensus string.
        author_alias: The alias recovered by signature verification.
    """

    def __init__(self, sender: str, author_alias: str | None) -> None:
        """Initialize with both identities.

        Args:
            sender: The sender declared in the consensus string.
            author_alias: The alias recovered by signature verification.
        """
        self.sender = sender
        self.author_alias = author_alias
        super().__init__(
            f"Signal param 'sender' ({sender}) does not match "
            f"verified author alias ({author_alias})"
        )


class NotLocatedError(SignalError):
    """Raised when signals without a usable location are compared."""

    def __init__(
        self,
        message: str = "Cannot compare signals without blockNumber or timestamp param",
    ) -> None:
        super().__init__(message)


class MalformedConsensusError(SignalError):
    """Raised when a consensus string cannot be composed or parsed.

    A consensus string must have exactly four segments. Anything else
    means the payload was tampered with or built incorrectly.

    Attributes:
        consensus: The offending consensus string or field value.
    """

    def __init__(self, consensus: str, reason: str = "") -> None:
        """Initialize with the offending value.

        Args:
            consensus: The offending consensus string or field value.
            reason: Optional detail appended to the message.
        """
        self.consensus = consensus
        message = f"Malformed consensus string: {consensus!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
