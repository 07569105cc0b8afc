"""Operation result types and status enums.

Standardized result types for outbound operations, used by the site
configuration API client and fetchers to report outcomes without raising.
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
