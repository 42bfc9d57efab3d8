"""Category database model.

Categories group products. A product must reference a live category;
the foreign key is enforced by the database, the "category exists" check
by the command handlers before writing.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseEntity


class Category(BaseEntity):
    """Product category.

    Fields:
        id, audit, soft-delete and row_version columns (from BaseEntity)
        name: Unique display name (max 100 characters)
        description: Optional description

    Indexes:
        - ix_categories_name: (name) UNIQUE

    Example:
        category = Category(name="Electronics", created_by="alice")
        await unit_of_work.repository(Category).add(category)
        await unit_of_work.save_changes()
    """

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        unique=True,
        index=True,
    )

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )
