"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Declarative base for ALL models (provides id, created_at, created_by)
- AuditMixin: Internal mixin that adds updated_at / updated_by
- SoftDeleteMixin: Internal mixin that adds the is_deleted / deleted_at / deleted_by triple
- BaseEntity: Base for every entity handled by the generic repository
  (combines the above plus the row_version concurrency token)

Usage:
    class ProductModel(BaseEntity):
        __tablename__ = "products"
        sku: Mapped[str]
        # Has: id, created_*, updated_*, is_deleted, deleted_*, row_version

Architecture:
    BaseModel (id, created_at, created_by)
        ↑
        └── BaseEntity (+ updated_* via AuditMixin,
            │            + soft delete via SoftDeleteMixin,
            │            + row_version as SQLAlchemy version_id_col)
            ├── Category
            └── Product

The row_version column is an opaque hex token regenerated by the mapper on
every INSERT and UPDATE. SQLAlchemy adds ``WHERE row_version = <loaded token>``
to UPDATE/DELETE statements and raises StaleDataError when no row matches;
the unit of work turns that into ConcurrencyConflictError.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import Boolean, DateTime, String, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, declared_attr, mapped_column
from uuid_extensions import uuid7


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def next_row_version(current: str | None) -> str:
    """Generate a fresh row version token (mapper version_id_generator)."""
    return uuid4().hex


class BaseModel(DeclarativeBase):
    """Declarative base for all database models.

    Provides common fields that ALL database models need:
    - id: UUID primary key (time-ordered uuid7, auto-generated)
    - created_at: Timestamp when record was created (UTC)
    - created_by: Actor that created the record
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid7,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    created_by: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        default="",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: String showing class name and ID.
        """
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging).

        Returns:
            dict: Dictionary representation of the model.
        """
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "created_by": self.created_by,
        }


class AuditMixin:
    """Mixin for mutable models that track who changed them and when.

    updated_at is stamped by the unit of work on every save of a modified
    entity; updated_by is set by the handler from the current actor.
    """

    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    updated_by: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    def touch(self, actor: str, at: datetime | None = None) -> None:
        """Record a modification by actor.

        Args:
            actor: Name of the user performing the change.
            at: Modification time (defaults to now, UTC).
        """
        self.updated_at = at or utcnow()
        self.updated_by = actor

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() to include audit fields."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        data["updated_by"] = self.updated_by
        return data


class SoftDeleteMixin:
    """Mixin for models that are soft-deleted instead of removed.

    Invariant: is_deleted implies deleted_at and deleted_by are set. Use
    mark_deleted() rather than assigning the fields one by one.
    """

    is_deleted: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
    )

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
    )

    deleted_by: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
    )

    def mark_deleted(self, actor: str, at: datetime | None = None) -> None:
        """Flag the entity as soft-deleted.

        Args:
            actor: Name of the user performing the delete.
            at: Deletion time (defaults to now, UTC).
        """
        self.is_deleted = True
        self.deleted_at = at or utcnow()
        self.deleted_by = actor

    def to_dict(self) -> dict[str, Any]:
        """Extend to_dict() with the soft-delete triple."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["is_deleted"] = self.is_deleted
        data["deleted_at"] = self.deleted_at.isoformat() if self.deleted_at else None
        data["deleted_by"] = self.deleted_by
        return data


class BaseEntity(SoftDeleteMixin, AuditMixin, BaseModel):
    """Base class for entities managed by the generic repository.

    Combines SoftDeleteMixin + AuditMixin + BaseModel with proper MRO and adds
    the optimistic concurrency token.

    Provides:
        - id, created_at, created_by (from BaseModel)
        - updated_at, updated_by (from AuditMixin)
        - is_deleted, deleted_at, deleted_by (from SoftDeleteMixin)
        - row_version (version_id_col, regenerated on every write)
    """

    __abstract__ = True

    row_version: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
    )

    @declared_attr.directive
    def __mapper_args__(cls) -> dict[str, Any]:
        return {
            "version_id_col": cls.row_version,
            "version_id_generator": next_row_version,
        }

    def to_dict(self) -> dict[str, Any]:
        """Extend to_dict() with the row version."""
        data: dict[str, Any] = super().to_dict()
        data["row_version"] = self.row_version
        return data
