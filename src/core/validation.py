"""Validation framework for input validation.

This module provides utility functions for common validation patterns.
All validation functions return Result types for consistent error handling;
request validators collect the failures into a field-to-messages map.

Usage:
    from src.core.validation import validate_not_empty, validate_max_length
    from src.core.result import Success, Failure

    result = validate_max_length(name, 200, "name", "Product name")
    match result:
        case Success(value=name):
            # Name is valid
            pass
        case Failure(error=error):
            # Handle validation error
            print(error.field, error.message)
"""

import re
from decimal import Decimal
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

type Number = int | float | Decimal


def validate_not_empty(
    value: Any, field_name: str, label: str | None = None
) -> Result[Any, ValidationError]:
    """Validate that a value is not empty.

    None, blank strings, and the nil UUID count as empty.

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.
        label: Human-readable field label used in the message.

    Returns:
        Success with value if not empty, Failure with ValidationError otherwise.
    """
    is_empty = (
        value is None
        or (isinstance(value, str) and not value.strip())
        or getattr(value, "int", None) == 0
    )
    if is_empty:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_REQUIRED,
                message=f"{label or field_name} is required",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str | None, max_length: int, field_name: str, label: str | None = None
) -> Result[str | None, ValidationError]:
    """Validate maximum string length.

    None passes (optional fields are checked with validate_not_empty).

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.
        label: Human-readable field label used in the message.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if value is not None and len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_TOO_LONG,
                message=f"{label or field_name} cannot exceed {max_length} characters",
                field=field_name,
            )
        )
    return Success(value=value)


def validate_pattern(
    value: str, pattern: str, field_name: str, message: str
) -> Result[str, ValidationError]:
    """Validate that a string fully matches a regular expression.

    Args:
        value: String to validate.
        pattern: Regular expression the whole value must match.
        field_name: Name of the field being validated.
        message: Message reported on mismatch.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if not re.fullmatch(pattern, value or ""):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_FORMAT,
                message=message,
                field=field_name,
            )
        )
    return Success(value=value)


def validate_range(
    value: Number,
    field_name: str,
    *,
    greater_than: Number | None = None,
    at_least: Number | None = None,
    less_than: Number | None = None,
    at_most: Number | None = None,
    message: str,
) -> Result[Number, ValidationError]:
    """Validate that a number lies within bounds.

    Only the bounds that are given are checked.

    Args:
        value: Number to validate.
        field_name: Name of the field being validated.
        greater_than: Exclusive lower bound.
        at_least: Inclusive lower bound.
        less_than: Exclusive upper bound.
        at_most: Inclusive upper bound.
        message: Message reported when a bound is violated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    out_of_range = (
        (greater_than is not None and not value > greater_than)
        or (at_least is not None and value < at_least)
        or (less_than is not None and not value < less_than)
        or (at_most is not None and value > at_most)
    )
    if out_of_range:
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALUE_OUT_OF_RANGE,
                message=message,
                field=field_name,
            )
        )
    return Success(value=value)


def collect_errors(
    *results: Result[Any, ValidationError],
) -> dict[str, list[str]]:
    """Merge validation results into a field-to-messages map.

    Successful results are ignored; failures are grouped by field in the
    order they were given.

    Args:
        *results: Results returned by the validate_* functions.

    Returns:
        Field name to list of messages (empty when everything passed).
    """
    errors: dict[str, list[str]] = {}
    for result in results:
        if isinstance(result, Failure):
            errors.setdefault(result.error.field or "", []).append(result.error.message)
    return errors
