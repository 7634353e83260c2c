"""Structured logging for the tater package."""

from tater.logging.setup import (
    configure_logging,
    get_module_logger,
    logger,
    _is_test_environment,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "logger",
    "_is_test_environment",
]
