from enum import Enum
from typing import Optional, Any

from utils.constants import INTERNAL_ERROR_MESSAGE


class ErrorKind(str, Enum):
    """Classifies every failure the API can report."""

    VALIDATION = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    STORE = "STORE_ERROR"
    INTERNAL = "INTERNAL_ERROR"


class BagDropError(Exception):
    """
    Base exception for the BagDrop API.
    Rendered by the registered exception handler as {"error": message, "details": details}.
    """
    def __init__(
        self,
        message: str,
        kind: ErrorKind = ErrorKind.INTERNAL,
        status_code: int = 500,
        details: Optional[Any] = None,
    ):
        self.message = message
        self.kind = kind
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class ValidationError(BagDropError):
    """
    Raised when required request fields are missing. Detected before any store call.
    """
    def __init__(self, message: str = "Validation error", details: Optional[Any] = None):
        super().__init__(message, kind=ErrorKind.VALIDATION, status_code=400, details=details)


class ResourceNotFoundError(BagDropError):
    """
    Raised when a requested resource is not found.
    """
    def __init__(self, message: str = "Resource not found", details: Optional[Any] = None):
        super().__init__(message, kind=ErrorKind.NOT_FOUND, status_code=404, details=details)


class StoreOperationError(BagDropError):
    """
    Raised when the database gateway reports a failure. The store message is surfaced verbatim.
    """
    def __init__(self, message: str = "Store error", details: Optional[Any] = None):
        super().__init__(message, kind=ErrorKind.STORE, status_code=500, details=details)


class InternalServerError(BagDropError):
    """
    Raised at an endpoint boundary when an unexpected exception escapes a handler.
    """
    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE, details: Optional[Any] = None):
        super().__init__(message, kind=ErrorKind.INTERNAL, status_code=500, details=details)
