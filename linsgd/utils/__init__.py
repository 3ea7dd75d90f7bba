"""Minimal utilities for the linsgd package."""

from linsgd.utils.logging import (
    configure_logging,
    get_logger,
    log_operation,
    log_performance,
)

__all__ = [
    "get_logger",
    "configure_logging",
    "log_performance",
    "log_operation",
]
