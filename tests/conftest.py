"""
Pytest configuration and shared fixtures for consensus-signal tests.

Testing Standards:
- Async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from consensus_signal import __version__

    return __version__


@pytest.fixture
def claim() -> dict[str, Any]:
    """A complete claim for signal construction."""
    return {
        "sender": "alice",
        "action": "vote",
        "epoch": "3",
        "block": "0xaa",
        "world": "earth",
    }


@pytest.fixture
def chain_stub():
    """Chain access stub knowing blocks 0xaa and 0xbb."""
    from consensus_signal.infrastructure.stubs import ChainAccessStub

    chain = ChainAccessStub()
    chain.add_block("0xaa", block_number=10, timestamp=1_700_000_000)
    chain.add_block("0xbb", block_number=12, timestamp=1_700_000_024)
    return chain


@pytest.fixture
def signing_stub():
    """Signing context stub signing as 'alice'."""
    from consensus_signal.infrastructure.stubs import SigningContextStub

    return SigningContextStub(alias="alice")
