"""Product commands (CQRS write operations).

Commands represent user intent to change product state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Commands don't return values (handlers return Result types)

Reference:
    - src/application/cqrs/requests.py
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from src.application.cqrs.requests import Command


@dataclass(frozen=True, kw_only=True)
class CreateProduct(Command[UUID]):
    """Create a product in an existing category.

    New products are active. The SKU must be unique among live products.

    Attributes:
        name: Product name (max 200 characters).
        sku: Stock keeping unit, uppercase letters, digits and hyphens.
        price: Unit price, greater than 0 and below 1,000,000.
        category_id: Category the product belongs to.
        stock_quantity: Units in stock (never negative).
        description: Optional description (max 2000 characters).

    Example:
        >>> command = CreateProduct(
        ...     name="Laptop",
        ...     sku="LAP-001",
        ...     price=Decimal("999.99"),
        ...     category_id=category_id,
        ...     stock_quantity=5,
        ... )
        >>> result = await dispatcher.dispatch(command)
    """

    name: str
    sku: str
    price: Decimal
    category_id: UUID
    stock_quantity: int = 0
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProduct(Command[bool]):
    """Replace the editable fields of a product.

    When row_version is given, the update only succeeds if the product has
    not been modified since that version was read; otherwise the save raises
    ConcurrencyConflictError.

    Attributes:
        product_id: Product to update.
        name: New name.
        sku: New SKU (unique among other live products).
        price: New price.
        category_id: New category.
        stock_quantity: New stock level.
        is_active: Whether the product is listed.
        description: New description.
        row_version: Version token read by the caller (optional).
    """

    product_id: UUID
    name: str
    sku: str
    price: Decimal
    category_id: UUID
    stock_quantity: int
    is_active: bool = True
    description: str | None = None
    row_version: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProduct(Command[bool]):
    """Soft-delete a product.

    The row stays in the table flagged as deleted and disappears from
    default reads.

    Attributes:
        product_id: Product to delete.
    """

    product_id: UUID
