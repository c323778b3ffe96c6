"""Observability infrastructure for structured logging.

Usage:
    from stubbable.infrastructure.observability import configure_structlog

    # At test session start or in a script
    configure_structlog(environment="development")
"""

from stubbable.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]
