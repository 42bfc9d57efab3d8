"""Result types for railway-oriented programming.

This module implements the Result pattern used by every command and query
handler. An outcome is exactly one of three variants:

- Success: the operation completed and carries its value.
- Failure: an expected domain failure (duplicate key, missing entity, ...).
- ValidationFailure: the request was rejected before the handler ran, with a
  field-to-messages map.

Variants are immutable and never raise when read. ``data`` on a failure is
always ``None``.

Usage:
    def divide(a: float, b: float) -> Result[float, str]:
        if b == 0:
            return Failure(error="Division by zero")
        return Success(value=a / b)

    result = divide(10, 2)
    match result:
        case Success(value=value):
            print(f"Result: {value}")
        case Failure(error=error):
            print(f"Error: {error}")
        case ValidationFailure(errors=errors):
            print(f"Invalid: {errors}")
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type

VALIDATION_FAILED_MESSAGE = "Validation failed"


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def data(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def data(self) -> None:
        """Failures never carry data."""
        return None


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationFailure:
    """Represents a request rejected by validation.

    The error map is copied and frozen on construction so a ValidationFailure
    cannot be mutated after it leaves the validation stage.

    Attributes:
        errors: Field name to list of messages.
        error: Summary message (always "Validation failed").
    """

    errors: Mapping[str, tuple[str, ...]]
    error: str = field(default=VALIDATION_FAILED_MESSAGE)

    def __post_init__(self) -> None:
        frozen = {name: tuple(messages) for name, messages in self.errors.items()}
        object.__setattr__(self, "errors", MappingProxyType(frozen))

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def data(self) -> None:
        """Validation failures never carry data."""
        return None


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E] | ValidationFailure
