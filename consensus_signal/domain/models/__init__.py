"""Domain models for consensus-signal.

Contains the Signal entity and the value objects it is built from.
"""

from consensus_signal.domain.models.consensus import (
    CONSENSUS_SEPARATOR,
    ConsensusClaim,
    compose_consensus,
    parse_consensus,
)
from consensus_signal.domain.models.signable_message import (
    BASE_DOMAIN_FIELDS,
    DomainField,
    SignableMessage,
)
from consensus_signal.domain.models.signal import Signal
from consensus_signal.domain.models.signal_params import (
    LOCATION_PARAM_KEYS,
    STANDARD_PARAM_KEYS,
    SignalParams,
)

__all__: list[str] = [
    "BASE_DOMAIN_FIELDS",
    "CONSENSUS_SEPARATOR",
    "ConsensusClaim",
    "DomainField",
    "LOCATION_PARAM_KEYS",
    "STANDARD_PARAM_KEYS",
    "SignableMessage",
    "Signal",
    "SignalParams",
    "compose_consensus",
    "parse_consensus",
]
