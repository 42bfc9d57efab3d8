"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Pagination envelope for list queries
- Error types (validation data errors, persistence exceptions)
- Validation helpers for request validators

The core module has NO dependencies on other application layers.
"""

from src.core.enums import ErrorCode
from src.core.errors import (
    ConcurrencyConflictError,
    PersistenceError,
    TransactionStateError,
    ValidationError,
)
from src.core.pagination import PaginatedResult
from src.core.result import Failure, Result, Success, ValidationFailure

__all__ = [
    "ConcurrencyConflictError",
    "ErrorCode",
    "Failure",
    "PaginatedResult",
    "PersistenceError",
    "Result",
    "Success",
    "TransactionStateError",
    "ValidationError",
    "ValidationFailure",
]
