"""Outcome categories for Weblate translation operations.

TranslationService reports every resolve, push and pull as one of these;
classify_weblate_error picks the category for a failed call.
"""

from enum import Enum


class OperationStatus(Enum):
    """Category of a resolve, push or pull against the Weblate API.

    Only TRANSIENT_ERROR marks a call worth repeating.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Connectivity failure, rate limit or 5xx response
        PERMANENT_ERROR: Rejected request or undecodable response body
        UNAUTHORIZED: Missing or invalid API token, or insufficient rights
        NOT_FOUND: Component, translation or file endpoint does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
