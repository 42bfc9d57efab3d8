"""GetProductById query handler.

Returns a live product with the name of its category.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Returns Result[ProductDto, str] (explicit error handling)
- Runs without a transaction (queries are side-effect free)
"""

from src.application.dtos.product_dtos import ProductDto
from src.application.queries.product_queries import GetProductById
from src.core.result import Failure, Result, Success
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.infrastructure.persistence.models import Category, Product


class GetProductByIdError:
    """GetProductById-specific errors."""

    PRODUCT_NOT_FOUND = "Product with ID '{product_id}' not found"


class GetProductByIdHandler:
    """Handler for GetProductById query.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Repositories

    Returns:
        Result[ProductDto, str]: Success(DTO) or Failure(error)
    """

    def __init__(self, unit_of_work: UnitOfWorkProtocol) -> None:
        self._unit_of_work = unit_of_work

    async def handle(self, query: GetProductById) -> Result[ProductDto, str]:
        """Handle GetProductById query.

        Args:
            query: GetProductById query.

        Returns:
            Success(ProductDto): Product found.
            Failure(error): Product missing or soft-deleted.
        """
        product = await self._unit_of_work.repository(Product).get_by_id(query.product_id)
        if product is None:
            return Failure(
                error=GetProductByIdError.PRODUCT_NOT_FOUND.format(
                    product_id=query.product_id
                )
            )

        category = await self._unit_of_work.repository(Category).get_by_id(
            product.category_id
        )

        return Success(
            value=ProductDto(
                id=product.id,
                name=product.name,
                description=product.description,
                sku=product.sku,
                price=product.price,
                stock_quantity=product.stock_quantity,
                is_active=product.is_active,
                category_id=product.category_id,
                category_name=category.name if category else "",
                created_at=product.created_at,
                created_by=product.created_by,
                row_version=product.row_version,
            )
        )
