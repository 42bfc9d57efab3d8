"""Category commands (CQRS write operations).

Commands represent user intent to change catalog state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Reference:
    - src/application/cqrs/requests.py
"""

from dataclasses import dataclass
from uuid import UUID

from src.application.cqrs.requests import Command


@dataclass(frozen=True, kw_only=True)
class CreateCategory(Command[UUID]):
    """Create a product category.

    Attributes:
        name: Unique category name (max 100 characters).
        description: Optional description (max 500 characters).

    Example:
        >>> command = CreateCategory(name="Electronics")
        >>> result = await dispatcher.dispatch(command)
    """

    name: str
    description: str | None = None
