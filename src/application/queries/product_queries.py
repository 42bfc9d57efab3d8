"""Product queries (CQRS read operations).

Queries represent requests for product data. They are immutable
dataclasses with question-like names. Queries NEVER change state.

Pattern:
- Queries are data containers (no logic)
- Handlers fetch and return data
- Queries never change state
- Queries never open a transaction

Reference:
    - src/application/cqrs/requests.py
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.application.cqrs.requests import Query
from src.application.dtos.product_dtos import ProductDto
from src.core.config import settings
from src.core.pagination import PaginatedResult


@dataclass(frozen=True, kw_only=True)
class GetProductById(Query[ProductDto]):
    """Get a single live product with its category name.

    Attributes:
        product_id: Product to retrieve.

    Example:
        >>> query = GetProductById(product_id=product_id)
        >>> result = await dispatcher.dispatch(query)
    """

    product_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProducts(Query[PaginatedResult[ProductDto]]):
    """List live products, newest first, one page at a time.

    Attributes:
        page_number: 1-based page number.
        page_size: Products per page (1 to the configured maximum; defaults
            to DEFAULT_PAGE_SIZE).
        search_term: Optional substring matched against name, description
            and SKU.
        category_id: Optional category filter.
        include_inactive: Include products that are not active.

    Example:
        >>> query = ListProducts(page_number=2, page_size=10)
        >>> result = await dispatcher.dispatch(query)
        >>> result.value.total_pages
    """

    page_number: int = 1
    page_size: int = field(default_factory=lambda: settings.default_page_size)
    search_term: str | None = None
    category_id: UUID | None = None
    include_inactive: bool = False
