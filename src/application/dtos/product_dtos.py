"""Product data transfer objects.

Read models returned by product queries. They are plain frozen dataclasses
so query results never expose mapped entities outside the unit of work.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ProductDto:
    """Product as seen by readers.

    Attributes:
        id: Product identifier.
        name: Product name.
        description: Optional description.
        sku: Stock keeping unit.
        price: Unit price.
        stock_quantity: Units in stock.
        is_active: Whether the product is listed.
        category_id: Owning category.
        category_name: Name of the owning category.
        created_at: Creation time (UTC).
        created_by: Actor that created the product.
        row_version: Version token to send back with an update.
    """

    id: UUID
    name: str
    description: str | None
    sku: str
    price: Decimal
    stock_quantity: int
    is_active: bool
    category_id: UUID
    category_name: str
    created_at: datetime
    created_by: str
    row_version: str
