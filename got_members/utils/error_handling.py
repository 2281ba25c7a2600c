"""
Error types for the member query layer.

Lookups that find nothing return None and empty aggregates return their
documented sentinels, so these exceptions only signal contract violations
and malformed data sources.
"""
from enum import Enum
from typing import Any, Dict, Optional


class ErrorSeverity(Enum):
    """Severity levels attached to application errors."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class AppError(Exception):
    """Base class for all application errors."""

    def __init__(
        self,
        message: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.severity = severity
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert the error to a dictionary."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "severity": self.severity.value,
            "details": self.details
        }


class InvalidArgumentError(AppError, TypeError):
    """A parameter outside its closed enumeration was supplied."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorSeverity.WARNING, details)


class RepositoryError(AppError):
    """The data source holds entities it cannot serve."""
