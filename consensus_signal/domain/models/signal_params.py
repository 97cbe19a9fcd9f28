"""Signal parameter store.

Parameters are the unsigned metadata that travels next to a signal's
signed payload. They live in one open mapping; a fixed set of reserved
keys marks the "standard" parameters and everything else is "custom".
The two views are computed on demand so there is a single source of
truth for the data and a single list of reserved keys.

Standard parameters:
- sig: signature over the signed payload
- alias: alias of the signer
- world: namespace bound into the signature's domain separator
- timestamp: resolved block timestamp
- blockNumber: resolved block height

Only standard parameters are ever serialized into a signal payload.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Any

STANDARD_PARAM_KEYS: tuple[str, ...] = ("sig", "alias", "world", "timestamp", "blockNumber")
LOCATION_PARAM_KEYS: tuple[str, ...] = ("timestamp", "blockNumber")

_INT_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(?!0[xX])([0-9]+))")


def to_int(value: Any) -> int | None:
    """Normalize a numeric parameter value to int.

    Values received over the wire may be ints, decimal strings or
    0x-prefixed hex strings. Strings are read by their leading integer,
    so "12.5" and "12abc" both give 12.

    Args:
        value: Raw parameter value.

    Returns:
        The integer value, or None if value is None.

    Raises:
        ValueError: If the value has no leading integer.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Expected integer parameter, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        match = _INT_PREFIX.match(value)
        if match is None:
            raise ValueError(f"Expected integer parameter, got {value!r}")
        sign, hex_digits, dec_digits = match.groups()
        number = int(hex_digits, 16) if hex_digits else int(dec_digits)
        return -number if sign == "-" else number
    return int(value)


class SignalParams:
    """Open key/value store with standard/custom partitioning.

    The store wraps a dict that it mutates in place. The signable
    message and the signal share that same dict, so a param written
    through one is visible through the other.

    Example:
        >>> params = SignalParams({"world": "earth"})
        >>> params.add({"note": "hello"})
        >>> params.custom
        {'note': 'hello'}
        >>> params.clear_custom()
        >>> "note" in params
        False
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        """Initialize the store.

        Args:
            data: Dict to wrap. A new empty dict is used if None.
        """
        self._data: dict[str, Any] = data if data is not None else {}

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"SignalParams({self._data!r})"

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw value of a param."""
        return self._data.get(key, default)

    def get_int(self, key: str) -> int | None:
        """Return a param normalized to int, or None if absent."""
        return to_int(self._data.get(key))

    def as_dict(self) -> dict[str, Any]:
        """Return a shallow copy of every param."""
        return dict(self._data)

    def add(self, partial: Mapping[str, Any]) -> None:
        """Merge params, overwriting existing keys of the same name.

        Args:
            partial: Params to merge.
        """
        self._data.update(partial)

    @property
    def standard(self) -> dict[str, Any]:
        """The five reserved params, None where absent."""
        return {key: self._data.get(key) for key in STANDARD_PARAM_KEYS}

    @property
    def custom(self) -> dict[str, Any]:
        """Every param that is not a reserved key."""
        return {
            key: value for key, value in self._data.items() if key not in STANDARD_PARAM_KEYS
        }

    def clear_custom(self) -> None:
        """Drop every param that is not a reserved key."""
        for key in list(self._data):
            if key not in STANDARD_PARAM_KEYS:
                del self._data[key]

    def clear_location(self) -> None:
        """Drop timestamp and blockNumber, keeping everything else."""
        for key in LOCATION_PARAM_KEYS:
            self._data.pop(key, None)
