"""Structlog configuration and logger setup.

Configures structlog with callsite context, exception formatting, secret
masking and environment-aware rendering.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    # Configure logging at startup
    configure_logging()

    # Get a logger for your module
    logger = get_module_logger()
    logger.info("event_name", key="value")

Dependencies:
    - infrastructure.configuration.Settings
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.configuration import settings
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
)


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structured logging.

    Args:
        log_level: Optional override for log level (DEBUG, INFO, WARNING, etc).
            Defaults to settings.LOG_LEVEL if not provided.
        is_production: Optional override for production mode. Defaults to
            settings.is_production if not provided. Controls JSON vs console output.

    Returns:
        Configured logger instance
    """
    # Suppress all logging during tests
    if _is_test_environment():
        logging.root.setLevel(logging.CRITICAL + 1)

        # Basic processors are still needed to avoid errors, but nothing is
        # emitted because the root logger level is above CRITICAL.
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

    prod_mode = is_production if is_production is not None else settings.is_production

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
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if not prod_mode:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

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


# Module-level logger (auto-configured on import)
logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger for the calling module with full path context.

    Returns:
        Logger bound with ``component`` (last dotted part of the module
        name) and ``module_path``.

    Example:
        # In modules/translations/resolver.py
        logger = get_module_logger()
        # context: {"component": "resolver", "module_path": "modules.translations.resolver"}
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
        context = {
            "component": parts[-1],
            "module_path": module_name,
        }
        return logger.bind(**context)

    return logger.bind(component="unknown")
