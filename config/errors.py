"""Estimator error handling.

Custom exceptions and error codes for the host side of the estimator
(project edits and exports). The totals calculator itself never raises.
"""

from typing import Optional, Dict, Any


# Error Codes
class ErrorCode:
    """Error code constants."""

    # Validation Errors (1xxx)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_FIELD = "INVALID_FIELD"
    INVALID_APPLY_MODE = "INVALID_APPLY_MODE"

    # Project State Errors (2xxx)
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    TRADE_NOT_FOUND = "TRADE_NOT_FOUND"

    # Export Errors (3xxx)
    EXPORT_FAILED = "EXPORT_FAILED"


class EstimatorError(Exception):
    """Base exception for estimator errors.

    Provides structured error information for callers and the CLI.

    Attributes:
        code: Error code from ErrorCode constants
        message: Human-readable error message
        details: Additional error context
    """

    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize EstimatorError.

        Args:
            code: Error code from ErrorCode constants
            message: Human-readable error message
            details: Additional error context
        """
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary.

        Returns:
            Dictionary with code, message, and details.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }

    def __repr__(self) -> str:
        return f"EstimatorError(code={self.code!r}, message={self.message!r})"


class ValidationError(EstimatorError):
    """Validation-specific error."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        code: str = ErrorCode.VALIDATION_ERROR,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            details={**(details or {}), "field": field} if field else details
        )
        self.field = field


class ItemNotFoundError(EstimatorError):
    """Raised when an edit targets a key that is not in the project."""

    def __init__(
        self,
        key: str,
        collection: str,
        details: Optional[Dict] = None
    ):
        code = ErrorCode.TRADE_NOT_FOUND if collection == "trades" else ErrorCode.ITEM_NOT_FOUND
        super().__init__(
            code=code,
            message=f"No {collection} entry with key {key!r}",
            details={**(details or {}), "key": key, "collection": collection}
        )
        self.key = key
        self.collection = collection


class ExportError(EstimatorError):
    """Export-specific error."""

    def __init__(
        self,
        message: str,
        path: str,
        details: Optional[Dict] = None
    ):
        super().__init__(
            code=ErrorCode.EXPORT_FAILED,
            message=message,
            details={**(details or {}), "path": path}
        )
        self.path = path
