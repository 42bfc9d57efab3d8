"""Domain-level error codes (machine-readable).

Error codes follow SUBJECT_REASON naming convention.
Used with Result types for railway-oriented programming.
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Carried by ValidationError so callers can branch on the kind of rule
    that failed without parsing messages.
    """

    # Validation errors
    VALUE_REQUIRED = "value_required"
    VALUE_TOO_LONG = "value_too_long"
    VALUE_OUT_OF_RANGE = "value_out_of_range"
    INVALID_FORMAT = "invalid_format"
