"""Generic repository implementation.

SQLAlchemy implementation of RepositoryProtocol for any BaseEntity subclass.
One instance serves one entity type and is bound to the session of the unit
of work that created it; it never outlives that unit of work.

Reference:
    - src/domain/protocols/repository_protocol.py
"""

from collections.abc import Iterable
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.attributes import set_committed_value

from src.infrastructure.persistence.base import BaseEntity

T = TypeVar("T", bound=BaseEntity)


class Repository(Generic[T]):
    """SQLAlchemy implementation of RepositoryProtocol.

    **Implementation Notes**:
    - Every default read path ANDs ``is_deleted IS false`` onto the criteria
    - ``*_including_deleted`` methods are the explicit ignore-filter path
    - Writes only stage changes on the session; UnitOfWork.save_changes()
      flushes them
    - remove() is a hard delete; soft delete is mark_deleted() + update()
    """

    def __init__(self, session: AsyncSession, entity_type: type[T]) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session owned by the unit of work.
            entity_type: Mapped entity class this repository serves.
        """
        self._session = session
        self._entity_type = entity_type

    @property
    def entity_type(self) -> type[T]:
        return self._entity_type

    def _live(self, *criteria: ColumnElement[bool]) -> tuple[ColumnElement[bool], ...]:
        """Combine criteria with the soft-delete filter."""
        return (self._entity_type.is_deleted.is_(False), *criteria)

    async def get_by_id(self, entity_id: UUID) -> T | None:
        """Find a live entity by ID.

        Args:
            entity_id: Unique entity identifier.

        Returns:
            Entity if found and not soft-deleted, None otherwise.
        """
        stmt = select(self._entity_type).where(
            *self._live(self._entity_type.id == entity_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_including_deleted(self, entity_id: UUID) -> T | None:
        """Find an entity by ID, soft-deleted or not.

        Args:
            entity_id: Unique entity identifier.

        Returns:
            Entity if found, None otherwise.
        """
        stmt = select(self._entity_type).where(self._entity_type.id == entity_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_all(self) -> list[T]:
        """List all live entities."""
        return await self.find()

    async def find(self, *criteria: ColumnElement[bool]) -> list[T]:
        """Find live entities matching all criteria.

        Args:
            *criteria: SQLAlchemy boolean expressions (combined with AND).

        Returns:
            Matching entities.
        """
        stmt = select(self._entity_type).where(*self._live(*criteria))
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def find_including_deleted(self, *criteria: ColumnElement[bool]) -> list[T]:
        """Find entities matching all criteria, soft-deleted or not."""
        stmt = select(self._entity_type)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self._session.execute(stmt)
        return list(result.scalars().all())

    async def any(self, *criteria: ColumnElement[bool]) -> bool:
        """Check whether any live entity matches all criteria.

        Used by handlers to pre-check uniqueness and references before
        writing.
        """
        stmt = select(exists().where(*self._live(*criteria)))
        result = await self._session.execute(stmt)
        return bool(result.scalar())

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Count live entities matching all criteria."""
        stmt = (
            select(func.count())
            .select_from(self._entity_type)
            .where(*self._live(*criteria))
        )
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def add(self, entity: T) -> None:
        """Stage a new entity."""
        self._session.add(entity)

    async def add_range(self, entities: Iterable[T]) -> None:
        """Stage several new entities."""
        self._session.add_all(list(entities))

    async def update(self, entity: T, *, row_version: str | None = None) -> None:
        """Stage changes to an existing entity.

        Args:
            entity: Entity with modified attributes.
            row_version: Token the caller read. Recorded as the entity's
                original version so the UPDATE only matches that version.
        """
        if row_version is not None:
            set_committed_value(entity, "row_version", row_version)
        self._session.add(entity)

    async def update_range(self, entities: Iterable[T]) -> None:
        """Stage changes to several existing entities."""
        for entity in entities:
            await self.update(entity)

    async def remove(self, entity: T) -> None:
        """Stage a hard delete."""
        await self._session.delete(entity)

    async def remove_range(self, entities: Iterable[T]) -> None:
        """Stage hard deletes of several entities."""
        for entity in entities:
            await self._session.delete(entity)
