"""Signal runtime configuration.

Configuration for the chain client, the local block clock and logging,
with environment variable overrides.

Environment Variables:
- SIGNAL_RPC_URL: Chain node JSON-RPC endpoint (default: http://localhost:8545)
- SIGNAL_RPC_TIMEOUT: RPC request timeout in seconds (default: 30.0)
- SIGNAL_CLOCK_CONFIRMATIONS: Blocks needed to confirm a block (default: 12)
- SIGNAL_DEFAULT_WORLD: World name applied to new claims (default: unset)
- SIGNAL_ENVIRONMENT: 'production' (JSON logs) or 'development' (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_float_env(key: str, default: float) -> float:
    """Get float environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed float value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass(frozen=True)
class SignalConfig:
    """Configuration for signal location and logging.

    Attributes:
        rpc_url: Chain node JSON-RPC endpoint.
        rpc_timeout_seconds: Request timeout for chain lookups.
        clock_confirmations: Blocks (inclusive) needed before the local
            clock treats a block as confirmed.
        default_world: World name applied to claims that carry none.
        environment: Logging mode, 'production' or 'development'.
    """

    rpc_url: str = "http://localhost:8545"
    rpc_timeout_seconds: float = 30.0
    clock_confirmations: int = 12
    default_world: str | None = None
    environment: str = "production"

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.rpc_url:
            raise ValueError("rpc_url must be non-empty")
        if self.rpc_timeout_seconds <= 0:
            raise ValueError(
                f"rpc_timeout_seconds must be positive, got {self.rpc_timeout_seconds}"
            )
        if self.clock_confirmations < 1:
            raise ValueError(
                f"clock_confirmations must be at least 1, got {self.clock_confirmations}"
            )

    @classmethod
    def from_environment(cls) -> "SignalConfig":
        """Create config from environment variables with defaults.

        Returns:
            SignalConfig with values from environment or defaults.
        """
        return cls(
            rpc_url=os.environ.get("SIGNAL_RPC_URL", "http://localhost:8545"),
            rpc_timeout_seconds=_get_float_env("SIGNAL_RPC_TIMEOUT", 30.0),
            clock_confirmations=_get_int_env("SIGNAL_CLOCK_CONFIRMATIONS", 12),
            default_world=os.environ.get("SIGNAL_DEFAULT_WORLD") or None,
            environment=os.environ.get("SIGNAL_ENVIRONMENT", "production"),
        )


# Default config
DEFAULT_SIGNAL_CONFIG = SignalConfig()

# Testing config: development logs, shallow confirmations
TEST_SIGNAL_CONFIG = SignalConfig(
    rpc_url="http://test",
    rpc_timeout_seconds=1.0,
    clock_confirmations=2,
    default_world="test-world",
    environment="development",
)
