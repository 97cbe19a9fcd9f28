"""Observability infrastructure: structured logging with structlog."""

from consensus_signal.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
