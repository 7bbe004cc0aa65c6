"""Custom structlog processors.

Usage:
    from infrastructure.logging.formatters import mask_sensitive_data

Dependencies:
    - structlog processors
"""

from typing import Any

# Keys whose values never reach the log output. The Weblate token is sent
# as an Authorization header, so both spellings are covered.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "apikey",
        "authorization",
        "credential",
        "cookie",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks sensitive data in log entries.

    Keys are matched case-insensitively against SENSITIVE_PATTERNS (plus
    any additional patterns); matching non-None values are replaced.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        masked = {}
        for key, value in event_dict.items():
            key_lower = key.lower()
            if value is not None and any(p in key_lower for p in patterns):
                masked[key] = mask_value
            else:
                masked[key] = value
        return masked

    return processor


def truncate_large_values(max_length: int = 2000):
    """Create a processor that truncates overly large string values.

    Raw response bodies (whole translation files) are logged for
    diagnostics; this keeps a single entry bounded.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
