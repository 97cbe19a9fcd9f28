"""
Domain layer - Pure signal logic for consensus-signal.

This layer contains:
- The Signal entity and its value objects
- The consensus codec and parameter store
- Location resolution and ordering services
- Ports (abstract interfaces) for block sources and signing
- Domain exceptions

CRITICAL: This layer must NOT import from application or infrastructure.
"""

from consensus_signal.domain.exceptions import SignalError
from consensus_signal.domain.models import Signal, SignableMessage

__all__: list[str] = [
    "SignalError",
    "SignableMessage",
    "Signal",
]
