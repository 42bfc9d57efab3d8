"""Core error types.

Usage:
    from src.core.errors import ValidationError
    from src.core.errors import ConcurrencyConflictError
"""

from src.core.errors.persistence_errors import (
    ConcurrencyConflictError,
    PersistenceError,
    TransactionStateError,
)
from src.core.errors.validation_error import ValidationError

__all__ = [
    "ValidationError",
    "PersistenceError",
    "ConcurrencyConflictError",
    "TransactionStateError",
]
