"""Structured logging infrastructure (structlog).

Public API:
    - configure_logging(): Initialize logging for the application
    - get_module_logger(): Get a logger for the calling module

Processors:
    - mask_sensitive_data(): Redact tokens and credentials
    - truncate_large_values(): Bound raw payloads in log entries

Example:
    from infrastructure.logging import get_module_logger

    logger = get_module_logger()
    logger.debug("translations_loaded", slug="project-component", count=3)
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)
from infrastructure.logging.formatters import (
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    "configure_logging",
    "get_module_logger",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
