"""Structlog logger setup.

Tater is a library: importing it never configures logging. Module loggers are
lazy structlog proxies, so they follow whatever configuration the host
application installs. ``configure_logging`` is an opt-in helper for scripts
and for the test-suite.

Usage:
    from tater.logging import configure_logging, get_module_logger

    # Optionally configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from tater.configuration import settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Replaces the global structlog configuration and the root logger level, so
    only applications (not libraries importing tater) should call it.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        json_logs: Optional override for JSON rendering. Defaults to
            settings.LOG_JSON if not provided.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Processors are still required, but nothing is emitted because the
        # root logger level is above CRITICAL
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        logging.basicConfig(
            format="%(message)s",
            level=logging.CRITICAL + 1,
            force=True,
        )
        return structlog.stdlib.get_logger()

    render_json = json_logs if json_logs is not None else settings.LOG_JSON

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if render_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    effective_log_level = log_level or settings.LOG_LEVEL
    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, effective_log_level.upper(), logging.INFO),
    )

    return structlog.stdlib.get_logger()


# Lazy proxy; resolved against the configuration in place at first use
logger = structlog.get_logger()


def get_module_logger():
    """Get a logger for the calling module with full path context.

    Returns a lazy logger carrying ``component`` and ``module_path`` for the
    calling module, e.g. a logger created in ``tater.i18n.store`` carries
    ``{"component": "store", "module_path": "tater.i18n.store"}``. Nothing is
    bound until the first log call, so module-level loggers pick up any
    configuration installed after import.

    Returns:
        Lazy structlog logger with module context
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    frame = current_frame.f_back
    if frame is None:
        return logger

    module = inspect.getmodule(frame)
    if module:
        module_name = module.__name__
        parts = module_name.split(".")
        return structlog.get_logger(component=parts[-1], module_path=module_name)

    return structlog.get_logger(component="unknown")
