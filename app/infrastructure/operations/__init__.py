"""Operation result types and status enums.

Standardized result types for translation operations, and the classifier
that turns Weblate provider exceptions into results.
"""

from infrastructure.operations.classifiers import classify_weblate_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_weblate_error",
]
