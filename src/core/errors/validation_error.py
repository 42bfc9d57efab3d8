"""Field validation error carried inside Result types.

Validation errors are data, not exceptions: the helpers in
``src.core.validation`` return ``Failure(error=ValidationError(...))`` and
validators fold them into a field-to-messages map.
"""

from dataclasses import dataclass

from src.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError:
    """One failed rule on one field.

    Attributes:
        code: Kind of rule that failed.
        message: Message shown to the caller (e.g. "SKU is required").
        field: Field name the message belongs to.
    """

    code: ErrorCode
    message: str
    field: str | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
