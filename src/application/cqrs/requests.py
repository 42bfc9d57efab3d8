"""Request contracts for the CQRS pipeline.

Every request dispatched through the pipeline derives from exactly one of
two marker bases:

- Command[TResponse]: intent to change state. Always runs inside a
  transaction.
- Query[TResponse]: request for data. Never opens a transaction.

The pipeline tells them apart with isinstance(), never by class name.
TResponse documents the value carried by a successful Result.

Usage:
    @dataclass(frozen=True, kw_only=True)
    class DeleteProduct(Command[bool]):
        product_id: UUID
"""

from typing import Generic, TypeVar

TResponse = TypeVar("TResponse")


class Request(Generic[TResponse]):
    """Common base of all dispatchable requests."""

    __slots__ = ()


class Command(Request[TResponse]):
    """Marker base for state-changing requests."""

    __slots__ = ()


class Query(Request[TResponse]):
    """Marker base for read-only requests."""

    __slots__ = ()


def is_command(request: object) -> bool:
    """Return True if request is a command (needs a transaction)."""
    return isinstance(request, Command)


def request_name(request: object) -> str:
    """Name used for the request in logs."""
    return type(request).__name__
