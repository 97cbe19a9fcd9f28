"""Domain services for consensus-signal.

Pure domain logic operating on Signal entities.
"""

from consensus_signal.domain.services.location_resolver import LocationResolver
from consensus_signal.domain.services.signal_ordering import (
    compare_signals,
    signal_sort_key,
    sort_signals,
)

__all__: list[str] = [
    "LocationResolver",
    "compare_signals",
    "signal_sort_key",
    "sort_signals",
]
