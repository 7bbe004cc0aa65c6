"""Operation result dataclass.

Uniform result returned by the translation service facade instead of
raising provider exceptions at the caller.
"""

from dataclasses import dataclass
from typing import Any, Optional

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Uniform result returned from operations.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs/troubleshooting
        data: Optional[Any] -- payload (Translation, XLIFF string, ...)
        error_code: Optional[str] -- machine error code (HTTP_404, DECODE_ERROR, ...)
        retry_after: Optional[int] -- seconds until retry when rate-limited
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_retryable(self) -> bool:
        """True when repeating the same call may succeed."""
        return self.status == OperationStatus.TRANSIENT_ERROR

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create an error OperationResult.

        Args:
            status: OperationStatus indicating error type
            message: Human-friendly error message
            error_code: Optional machine error code
            retry_after: Optional seconds until retry (for rate limiting)
            data: Optional payload, e.g. the raw response body

        Returns:
            OperationResult with the given error status
        """
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after, data
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls.error(
            OperationStatus.PERMANENT_ERROR, message, error_code, data=data
        )
