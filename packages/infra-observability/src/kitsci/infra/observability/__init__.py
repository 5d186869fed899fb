"""kitsci Infra Observability -- structlog configuration for settings sessions."""

from __future__ import annotations

from kitsci.infra.observability.logging import (
    LoggingSettings,
    configure_logging,
    get_logger,
    get_logging_settings,
)

__all__ = [
    "LoggingSettings",
    "configure_logging",
    "get_logger",
    "get_logging_settings",
]
