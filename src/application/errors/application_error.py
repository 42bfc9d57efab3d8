"""Application layer error types.

This module defines application-level errors that a boundary (HTTP
controller, CLI) builds from a handler outcome to choose a response status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Convert a non-successful Result
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from src.core.result import Failure, Result, ValidationFailure


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    These codes represent failures at the application layer (command/query
    handlers and the validation stage).

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Product with ID '...' not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        details: Additional context as key-value pairs (field -> messages
            for validation failures)

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
        ...     message="Validation failed",
        ...     details={"sku": "SKU is required"},
        ... )
    """

    code: ApplicationErrorCode
    message: str
    details: dict[str, str] | None = None


# Handler failure messages follow "... not found" / "... already exists"
_NOT_FOUND_MARKER = "not found"
_CONFLICT_MARKER = "already exists"


def to_application_error(result: Result[Any, Any]) -> ApplicationError | None:
    """Convert a handler outcome into an ApplicationError.

    Args:
        result: Outcome returned by the dispatcher.

    Returns:
        None for Success; otherwise an ApplicationError whose code is
        COMMAND_VALIDATION_FAILED, NOT_FOUND, CONFLICT or
        COMMAND_EXECUTION_FAILED.
    """
    match result:
        case ValidationFailure(errors=errors, error=message):
            return ApplicationError(
                code=ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
                message=message,
                details={field: "; ".join(messages) for field, messages in errors.items()},
            )
        case Failure(error=error):
            message = str(error)
            lowered = message.lower()
            if _NOT_FOUND_MARKER in lowered:
                code = ApplicationErrorCode.NOT_FOUND
            elif _CONFLICT_MARKER in lowered:
                code = ApplicationErrorCode.CONFLICT
            else:
                code = ApplicationErrorCode.COMMAND_EXECUTION_FAILED
            return ApplicationError(code=code, message=message)
        case _:
            return None
