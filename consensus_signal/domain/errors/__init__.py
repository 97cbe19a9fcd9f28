"""Domain errors for consensus-signal.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from SignalError.
"""

from consensus_signal.domain.errors.chain import ChainAccessError
from consensus_signal.domain.errors.signal import (
    MalformedConsensusError,
    MissingAnchorError,
    MissingCollaboratorError,
    MissingRequiredParamError,
    MissingSenderError,
    NotLocatedError,
    SenderMismatchError,
)
from consensus_signal.domain.errors.signing import (
    MissingSignatureError,
    SignatureVerificationError,
    SigningError,
)

__all__: list[str] = [
    "ChainAccessError",
    "MalformedConsensusError",
    "MissingAnchorError",
    "MissingCollaboratorError",
    "MissingRequiredParamError",
    "MissingSenderError",
    "MissingSignatureError",
    "NotLocatedError",
    "SenderMismatchError",
    "SignatureVerificationError",
    "SigningError",
]
