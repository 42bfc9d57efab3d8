"""ListProducts query handler.

Reads one page of products with a single joined raw SQL query plus a count
query, projecting rows straight into ProductDto (no entity loading).

The SQL stays portable between PostgreSQL and SQLite: booleans are tested
with NOT/OR, LIKE patterns are built with || and compared through lower()
on both sides, and paging uses LIMIT/OFFSET. Every value is a bind
parameter; LIKE wildcards typed by the caller are escaped.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[PaginatedResult[ProductDto], str]
- Page and count queries run one after the other on the same session
"""

from typing import Any

from sqlalchemy import Boolean, DateTime, Integer, Numeric, String, Uuid, bindparam, text

from src.application.dtos.product_dtos import ProductDto
from src.application.queries.product_queries import ListProducts
from src.core.pagination import PaginatedResult
from src.core.result import Result, Success
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

_FILTERS = """
    FROM products p
    INNER JOIN categories c ON p.category_id = c.id
    WHERE NOT p.is_deleted
        AND NOT c.is_deleted
        AND (:include_inactive OR p.is_active)
        AND (:category_id IS NULL OR p.category_id = :category_id)
        AND (:search IS NULL
             OR lower(p.name) LIKE '%' || lower(:search) || '%' ESCAPE '\\'
             OR lower(p.description) LIKE '%' || lower(:search) || '%' ESCAPE '\\'
             OR lower(p.sku) LIKE '%' || lower(:search) || '%' ESCAPE '\\')
"""

_FILTER_PARAMS = (
    bindparam("include_inactive", type_=Boolean),
    bindparam("category_id", type_=Uuid),
    bindparam("search", type_=String),
)

PAGE_SQL = (
    text(
        """
    SELECT
        p.id,
        p.name,
        p.description,
        p.sku,
        p.price,
        p.stock_quantity,
        p.is_active,
        p.category_id,
        c.name AS category_name,
        p.created_at,
        p.created_by,
        p.row_version
    """
        + _FILTERS
        + """
    ORDER BY p.created_at DESC, p.id DESC
    LIMIT :page_size OFFSET :offset
    """
    )
    .bindparams(
        *_FILTER_PARAMS,
        bindparam("page_size", type_=Integer),
        bindparam("offset", type_=Integer),
    )
    .columns(
        id=Uuid,
        price=Numeric(18, 2, asdecimal=True),
        is_active=Boolean,
        category_id=Uuid,
        created_at=DateTime(timezone=True),
    )
)

COUNT_SQL = text("SELECT COUNT(*)" + _FILTERS).bindparams(*_FILTER_PARAMS)


def escape_like(term: str) -> str:
    """Make % and _ in a search term match themselves (ESCAPE '\\')."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ListProductsHandler:
    """Handler for ListProducts query.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Raw query execution

    Returns:
        Result[PaginatedResult[ProductDto], str]: Success(page)
    """

    def __init__(self, unit_of_work: UnitOfWorkProtocol) -> None:
        self._unit_of_work = unit_of_work

    async def handle(
        self, query: ListProducts
    ) -> Result[PaginatedResult[ProductDto], str]:
        """Handle ListProducts query.

        Args:
            query: Paging and filter options (already validated).

        Returns:
            Success(PaginatedResult[ProductDto]): Requested page, newest first.
        """
        search = query.search_term.strip() if query.search_term else None
        filters: dict[str, Any] = {
            "include_inactive": query.include_inactive,
            "category_id": query.category_id,
            "search": escape_like(search) if search else None,
        }

        items = await self._unit_of_work.execute_query(
            PAGE_SQL,
            {
                **filters,
                "page_size": query.page_size,
                "offset": (query.page_number - 1) * query.page_size,
            },
            row_type=ProductDto,
        )
        total_count = await self._unit_of_work.execute_scalar(COUNT_SQL, filters)

        return Success(
            value=PaginatedResult(
                items=items,
                page_number=query.page_number,
                page_size=query.page_size,
                total_count=int(total_count or 0),
            )
        )
