"""Unit of work protocol (port).

A unit of work owns one storage session and at most one open transaction.
It is created per logical operation (one inbound request) and closed at the
end of it. It is NOT safe to share between concurrent tasks.

State machine:
    IDLE --begin_transaction--> OPEN --commit--> COMMITTED --> IDLE
                                     --rollback--> ROLLED_BACK --> IDLE

Calling begin_transaction() while OPEN raises TransactionStateError.
Closing while OPEN rolls back implicitly.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, TypeVar

if TYPE_CHECKING:
    from sqlalchemy.sql import Executable

    from src.domain.protocols.repository_protocol import RepositoryProtocol

T = TypeVar("T")
R = TypeVar("R")


class TransactionState(str, Enum):
    """Lifecycle of the unit of work's explicit transaction."""

    IDLE = "idle"
    OPEN = "open"
    COMMITTED = "committed"
    ROLLED_BACK = "rolled_back"


class UnitOfWorkProtocol(Protocol):
    """Coordinates repositories and owns the transaction lifecycle."""

    @property
    def transaction_state(self) -> TransactionState:
        """Current transaction state."""
        ...

    @property
    def has_active_transaction(self) -> bool:
        """True while an explicit transaction is open."""
        ...

    def repository(self, entity_type: type[T]) -> RepositoryProtocol[T]:
        """Return the repository for an entity type (same instance per type)."""
        ...

    async def save_changes(self) -> int:
        """Flush staged changes and return the number of affected entities.

        Raises:
            ConcurrencyConflictError: A row version did not match.
        """
        ...

    async def begin_transaction(self) -> None:
        """Open an explicit transaction.

        Raises:
            TransactionStateError: A transaction is already open.
        """
        ...

    async def commit_transaction(self) -> None:
        """Save staged changes and commit the open transaction.

        Raises:
            TransactionStateError: No transaction is open.
        """
        ...

    async def rollback_transaction(self) -> None:
        """Roll back the open transaction.

        Raises:
            TransactionStateError: No transaction is open.
        """
        ...

    async def execute_query(
        self,
        sql: str | Executable,
        parameters: Mapping[str, Any] | None = None,
        *,
        row_type: type[R] | None = None,
    ) -> list[Any]:
        """Run a raw read query with bound parameters.

        Returns:
            Row dicts, or ``row_type(**row)`` instances when row_type is given.
        """
        ...

    async def execute_scalar(
        self, sql: str | Executable, parameters: Mapping[str, Any] | None = None
    ) -> Any:
        """Run a raw query and return the first column of the first row."""
        ...

    async def close(self) -> None:
        """Release the session, rolling back an open transaction first."""
        ...
