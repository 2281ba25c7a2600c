"""
Shared utilities for the member query layer.
"""

from got_members.utils.error_handling import (
    AppError,
    ErrorSeverity,
    InvalidArgumentError,
    RepositoryError
)

__all__ = ["AppError", "ErrorSeverity", "InvalidArgumentError", "RepositoryError"]
