"""Bootstrap wiring for signal collaborators.

Builds the chain client, local block clock and sequencer from a
SignalConfig. A .env file in the working directory is loaded before
reading the environment.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv

from consensus_signal.application.services.signal_sequencer import SignalSequencer
from consensus_signal.bootstrap.logging import configure_structlog
from consensus_signal.config.signal_config import SignalConfig
from consensus_signal.domain.models.signal import Signal
from consensus_signal.infrastructure.adapters.chain_rpc_client import ChainRpcClient
from consensus_signal.infrastructure.cache.block_clock import BlockClock


def load_config() -> SignalConfig:
    """Load .env, configure logging, and read SignalConfig from env."""
    load_dotenv()
    config = SignalConfig.from_environment()
    configure_structlog(config.environment)
    return config


def create_chain_client(config: SignalConfig) -> ChainRpcClient:
    return ChainRpcClient(rpc_url=config.rpc_url, timeout=config.rpc_timeout_seconds)


def create_block_clock(config: SignalConfig) -> BlockClock:
    return BlockClock(confirmations=config.clock_confirmations)


def create_sequencer(
    config: SignalConfig,
    chain: ChainRpcClient | None = None,
    clock: BlockClock | None = None,
) -> SignalSequencer:
    """Create a SignalSequencer, building missing collaborators from config."""
    return SignalSequencer(
        chain=chain if chain is not None else create_chain_client(config),
        clock=clock if clock is not None else create_block_clock(config),
    )


def create_signal(config: SignalConfig, claim: Mapping[str, Any]) -> Signal:
    """Create a Signal from a claim, applying the configured default world."""
    claim = dict(claim)
    if claim.get("world") is None and config.default_world is not None:
        claim["world"] = config.default_world
    return Signal(claim=claim)


__all__ = [
    "create_block_clock",
    "create_chain_client",
    "create_sequencer",
    "create_signal",
    "load_config",
]
