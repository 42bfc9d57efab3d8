"""Product database model.

Products are the main sample aggregate of the catalog. The SKU is a natural
key: unique across all rows (including soft-deleted ones, since the unique
index covers the whole table).
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseEntity


class Product(BaseEntity):
    """Product in the catalog.

    Fields:
        id, audit, soft-delete and row_version columns (from BaseEntity)
        name: Display name (max 200 characters)
        description: Optional description (max 2000 characters)
        sku: Stock keeping unit, unique (max 50 characters)
        price: Unit price
        stock_quantity: Units in stock
        is_active: Whether the product is listed
        category_id: Owning category (FK categories.id)

    Indexes:
        - ix_products_sku: (sku) UNIQUE
        - ix_products_category_id_is_active: (category_id, is_active)
        - ix_products_name: (name)
    """

    __tablename__ = "products"

    name: Mapped[str] = mapped_column(String(200), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    sku: Mapped[str] = mapped_column(String(50), nullable=False)

    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), nullable=False)

    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    category_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("categories.id"),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_products_sku", "sku", unique=True),
        Index("ix_products_category_id_is_active", "category_id", "is_active"),
        Index("ix_products_name", "name"),
    )
