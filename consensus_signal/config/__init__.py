"""Configuration module for consensus-signal.

Available Configurations:
- SignalConfig: Chain client, local clock and logging settings
"""

from consensus_signal.config.signal_config import (
    DEFAULT_SIGNAL_CONFIG,
    TEST_SIGNAL_CONFIG,
    SignalConfig,
)

__all__ = [
    "SignalConfig",
    "DEFAULT_SIGNAL_CONFIG",
    "TEST_SIGNAL_CONFIG",
]
