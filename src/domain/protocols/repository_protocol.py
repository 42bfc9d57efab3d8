"""Generic repository protocol (port).

One repository serves one entity type and is bound to the session of the
unit of work that created it. Read methods apply the soft-delete filter
(``is_deleted IS false``) on every path; the ``*_including_deleted``
variants are the only way to see soft-deleted rows.

Write methods only stage changes. Nothing is durable until
``UnitOfWorkProtocol.save_changes()`` runs.

Criteria are SQLAlchemy boolean column expressions such as
``Product.sku == "SKU-1"``. Several criteria are combined with AND.

Following hexagonal architecture:
- Domain/application code depends on this protocol
- Infrastructure provides the SQLAlchemy implementation
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, TypeVar
from uuid import UUID

if TYPE_CHECKING:
    from sqlalchemy import ColumnElement

# Generic type for entities
T = TypeVar("T")


class RepositoryProtocol(Protocol[T]):
    """CRUD + predicate query operations over a single entity type."""

    async def get_by_id(self, entity_id: UUID) -> T | None:
        """Find a live (not soft-deleted) entity by ID.

        Args:
            entity_id: The UUID of the entity to find.

        Returns:
            The entity if found and not deleted, None otherwise.
        """
        ...

    async def get_by_id_including_deleted(self, entity_id: UUID) -> T | None:
        """Find an entity by ID, ignoring the soft-delete filter."""
        ...

    async def list_all(self) -> list[T]:
        """Return every live entity."""
        ...

    async def find(self, *criteria: ColumnElement[bool]) -> list[T]:
        """Return live entities matching all criteria."""
        ...

    async def find_including_deleted(self, *criteria: ColumnElement[bool]) -> list[T]:
        """Return entities matching all criteria, ignoring the soft-delete filter."""
        ...

    async def any(self, *criteria: ColumnElement[bool]) -> bool:
        """Check whether any live entity matches all criteria."""
        ...

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count live entities matching all criteria."""
        ...

    async def add(self, entity: T) -> None:
        """Stage a new entity for insertion."""
        ...

    async def add_range(self, entities: Iterable[T]) -> None:
        """Stage several new entities for insertion."""
        ...

    async def update(self, entity: T, *, row_version: str | None = None) -> None:
        """Stage changes to an existing entity.

        Args:
            entity: Entity with modified attributes.
            row_version: Version token the caller read. When given, the save
                step checks the stored token against it instead of the one
                loaded by this session.
        """
        ...

    async def update_range(self, entities: Iterable[T]) -> None:
        """Stage changes to several existing entities."""
        ...

    async def remove(self, entity: T) -> None:
        """Stage a HARD delete of an entity."""
        ...

    async def remove_range(self, entities: Iterable[T]) -> None:
        """Stage HARD deletes of several entities."""
        ...
