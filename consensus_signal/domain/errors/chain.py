"""Chain access domain exceptions."""

from consensus_signal.domain.exceptions import SignalError


class ChainAccessError(SignalError):
    """Raised when the chain node answers a block query with an error.

    A block that simply does not exist is NOT an error; the chain
    client returns None for it and the signal's location is cleared.

    Attributes:
        code: JSON-RPC error code, if the node supplied one.
    """

    def __init__(self, message: str = "Chain access failed", code: int | None = None) -> None:
        """Initialize with the node's error details.

        Args:
            message: Error description from the node.
            code: JSON-RPC error code, if any.
        """
        if code is not None:
            message = f"{message} (code {code})"
        super().__init__(message)
        self.code = code
