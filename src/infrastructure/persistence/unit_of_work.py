"""SQLAlchemy unit of work.

Implements UnitOfWorkProtocol on top of one AsyncSession. Repositories
created here share that session, so everything they stage is flushed by a
single save_changes() call and committed (or rolled back) together.

Reference:
    - src/domain/protocols/unit_of_work_protocol.py
"""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError
from sqlalchemy.sql import Executable

from src.core.errors import ConcurrencyConflictError, TransactionStateError
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import TransactionState
from src.infrastructure.persistence.base import AuditMixin, BaseEntity, utcnow
from src.infrastructure.persistence.repository import Repository

T = TypeVar("T", bound=BaseEntity)
R = TypeVar("R")

type RepositoryFactory = Callable[[AsyncSession, type[Any]], Repository[Any]]


class SqlAlchemyUnitOfWork:
    """Unit of work over a single SQLAlchemy async session.

    Not safe for concurrent use: one unit of work serves one request on one
    task.

    Usage:
        async with SqlAlchemyUnitOfWork(session, logger) as uow:
            products = uow.repository(Product)
            await products.add(Product(...))
            await uow.save_changes()
    """

    def __init__(
        self,
        session: AsyncSession,
        logger: LoggerProtocol,
        repository_factories: Mapping[type[Any], RepositoryFactory] | None = None,
    ) -> None:
        """Initialize unit of work.

        Args:
            session: Session owned (and eventually closed) by this unit of work.
            logger: Logger for transaction lifecycle events.
            repository_factories: Optional per-entity repository overrides.
                Entity types without an entry get the generic Repository.
        """
        self._session = session
        self._logger = logger
        self._repository_factories = dict(repository_factories or {})
        self._repositories: dict[type[Any], Repository[Any]] = {}
        self._state = TransactionState.IDLE
        self._closed = False

    async def __aenter__(self) -> "SqlAlchemyUnitOfWork":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def session(self) -> AsyncSession:
        return self._session

    @property
    def transaction_state(self) -> TransactionState:
        return self._state

    @property
    def has_active_transaction(self) -> bool:
        return self._state is TransactionState.OPEN

    def repository(self, entity_type: type[T]) -> Repository[T]:
        """Return the repository for entity_type.

        The same instance is returned for the lifetime of this unit of work.
        """
        repository = self._repositories.get(entity_type)
        if repository is None:
            factory = self._repository_factories.get(entity_type, Repository)
            repository = factory(self._session, entity_type)
            self._repositories[entity_type] = repository
        return repository

    # =========================================================================
    # Saving
    # =========================================================================

    def _pending_changes(self) -> tuple[list[Any], list[Any], list[Any]]:
        session = self._session
        modified = [obj for obj in session.dirty if session.is_modified(obj)]
        return list(session.new), modified, list(session.deleted)

    async def save_changes(self) -> int:
        """Flush staged changes to the database.

        Outside an explicit transaction the flush is committed immediately.
        Inside one, the changes stay pending until commit_transaction().

        Returns:
            Number of entities inserted, updated or deleted.

        Raises:
            ConcurrencyConflictError: An UPDATE or DELETE matched no row for
                the expected row version.
        """
        added, modified, deleted = self._pending_changes()
        now = utcnow()
        for entity in modified:
            if isinstance(entity, AuditMixin):
                entity.updated_at = now

        try:
            await self._session.flush()
            if not self.has_active_transaction:
                await self._session.commit()
        except StaleDataError as e:
            if not self.has_active_transaction:
                await self._session.rollback()
            entity_type = _entity_type_name(modified + deleted)
            self._logger.warning(
                "Concurrency conflict while saving changes",
                entity_type=entity_type,
                error_message=str(e),
            )
            raise ConcurrencyConflictError(
                "The record was modified by another user since it was loaded",
                entity_type=entity_type,
            ) from e
        except SQLAlchemyError:
            if not self.has_active_transaction:
                await self._session.rollback()
            raise

        count = len(added) + len(modified) + len(deleted)
        self._logger.debug(
            "Changes saved",
            added=len(added),
            modified=len(modified),
            deleted=len(deleted),
        )
        return count

    # =========================================================================
    # Transactions
    # =========================================================================

    async def begin_transaction(self) -> None:
        """Open an explicit transaction.

        Raises:
            TransactionStateError: A transaction is already open.
        """
        if self._state is TransactionState.OPEN:
            raise TransactionStateError("A transaction is already open")
        # A session that autobegan on an earlier read is adopted as-is
        if not self._session.in_transaction():
            await self._session.begin()
        self._state = TransactionState.OPEN

    async def commit_transaction(self) -> None:
        """Save staged changes and commit the open transaction.

        If saving or committing fails the transaction is rolled back and the
        error re-raised.

        Raises:
            TransactionStateError: No transaction is open.
            ConcurrencyConflictError: A row version did not match.
        """
        self._require_open("commit")
        try:
            await self.save_changes()
            await self._session.commit()
        except (Exception, asyncio.CancelledError):
            await self._session.rollback()
            self._state = TransactionState.ROLLED_BACK
            raise
        self._state = TransactionState.COMMITTED

    async def rollback_transaction(self) -> None:
        """Roll back the open transaction, discarding staged changes.

        Raises:
            TransactionStateError: No transaction is open.
        """
        self._require_open("roll back")
        try:
            await self._session.rollback()
        finally:
            self._state = TransactionState.ROLLED_BACK

    def _require_open(self, action: str) -> None:
        if self._state is not TransactionState.OPEN:
            raise TransactionStateError(f"Cannot {action}: no transaction is open")

    # =========================================================================
    # Raw queries
    # =========================================================================

    async def execute_query(
        self,
        sql: str | Executable,
        parameters: Mapping[str, Any] | None = None,
        *,
        row_type: type[R] | None = None,
    ) -> list[Any]:
        """Run a raw read query with bound parameters.

        Values are always passed as bind parameters, never interpolated into
        the SQL text.

        Args:
            sql: SQL text or a prepared statement (e.g. text(...).columns(...)).
            parameters: Bind parameter values by name.
            row_type: Optional type constructed as ``row_type(**row)``.

        Returns:
            List of row dicts, or row_type instances.
        """
        statement = text(sql) if isinstance(sql, str) else sql
        result = await self._session.execute(statement, dict(parameters or {}))
        rows = result.mappings().all()
        if row_type is None:
            return [dict(row) for row in rows]
        return [row_type(**row) for row in rows]

    async def execute_scalar(
        self, sql: str | Executable, parameters: Mapping[str, Any] | None = None
    ) -> Any:
        """Run a raw query and return the first column of the first row.

        Returns:
            The value, or None when the query returns no rows.
        """
        statement = text(sql) if isinstance(sql, str) else sql
        result = await self._session.execute(statement, dict(parameters or {}))
        return result.scalar()

    # =========================================================================
    # Lifecycle
    # =========================================================================

    async def close(self) -> None:
        """Release the session.

        An open transaction is rolled back first. Safe to call twice.
        """
        if self._closed:
            return
        self._closed = True
        try:
            if self._state is TransactionState.OPEN:
                self._logger.warning("Closing unit of work with open transaction")
                await self.rollback_transaction()
        finally:
            self._repositories.clear()
            await self._session.close()


def _entity_type_name(entities: list[Any]) -> str | None:
    types = {type(entity).__name__ for entity in entities}
    return types.pop() if len(types) == 1 else None
