"""Observability module for logging and metrics."""

from typedconf.observability.logging import (
    bind_config_context,
    clear_config_context,
    configure_logging,
    get_logger,
)
from typedconf.observability.metrics import ConfigMetrics


__all__ = [
    "ConfigMetrics",
    "bind_config_context",
    "clear_config_context",
    "configure_logging",
    "get_logger",
]
