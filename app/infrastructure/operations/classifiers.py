"""Error classifiers for Weblate provider exceptions.

Converts the exceptions raised by the Weblate client, resolver and transfer
layers into OperationResult objects so callers can branch on a typed
outcome instead of catching exceptions.

Usage:
    from infrastructure.operations.classifiers import classify_weblate_error

    try:
        translation = resolver.get_translation(component, "de")
    except WeblateError as exc:
        return classify_weblate_error(exc)
"""

from integrations.weblate.errors import (
    DecodeError,
    TransportError,
    UnexpectedStatusError,
    WeblateError,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER = 60


def classify_weblate_error(exc: WeblateError) -> OperationResult:
    """Classify a Weblate provider exception into an OperationResult.

    Mapping:
    - TransportError: TRANSIENT_ERROR (TRANSPORT_ERROR)
    - 401/403: UNAUTHORIZED
    - 404: NOT_FOUND
    - 429: TRANSIENT_ERROR with retry_after
    - 5xx: TRANSIENT_ERROR
    - other unexpected status: PERMANENT_ERROR
    - DecodeError: PERMANENT_ERROR (DECODE_ERROR)

    Args:
        exc: Exception raised by the Weblate integration layer

    Returns:
        OperationResult with status, message and error_code set. The raw
        response body, when there is one, is carried in ``data``.
    """
    message = str(exc)

    if isinstance(exc, TransportError):
        return OperationResult.transient_error(message, error_code="TRANSPORT_ERROR")

    if isinstance(exc, DecodeError):
        return OperationResult.permanent_error(
            message, error_code="DECODE_ERROR", data=exc.content
        )

    if isinstance(exc, UnexpectedStatusError):
        status_code = exc.status_code
        error_code = f"HTTP_{status_code}"

        if status_code in (401, 403):
            return OperationResult.error(
                OperationStatus.UNAUTHORIZED,
                message,
                error_code=error_code,
                data=exc.content,
            )

        if status_code == 404:
            return OperationResult.error(
                OperationStatus.NOT_FOUND,
                message,
                error_code=error_code,
                data=exc.content,
            )

        if status_code == 429:
            return OperationResult.transient_error(
                message,
                error_code=error_code,
                retry_after=exc.retry_after or DEFAULT_RETRY_AFTER,
                data=exc.content,
            )

        if 500 <= status_code < 600:
            return OperationResult.transient_error(
                message, error_code=error_code, data=exc.content
            )

        return OperationResult.permanent_error(
            message, error_code=error_code, data=exc.content
        )

    return OperationResult.permanent_error(message, error_code="WEBLATE_ERROR")
