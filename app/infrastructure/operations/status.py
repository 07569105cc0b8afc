"""Operation status enumeration."""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Retryable error (network, timeout, 5xx)
        PERMANENT_ERROR: Non-retryable error (bad request, validation)
        NOT_FOUND: Resource not found
        CONFLICT: Write rejected because the resource changed underneath
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
