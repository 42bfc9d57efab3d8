"""CreateProduct command handler.

Handles product creation. Verifies the SKU is free and the category exists
before staging the new product.

Architecture:
- Application layer handler (orchestrates business logic)
- Works through the unit of work injected by the dispatcher
- Uses Result types for expected failures; infrastructure errors propagate
  so the transaction behavior can roll back
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.product_commands import CreateProduct
from src.application.services.current_actor import resolve_actor
from src.core.result import Failure, Result, Success
from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.infrastructure.persistence.models import Category, Product


class CreateProductError:
    """CreateProduct-specific errors."""

    SKU_ALREADY_EXISTS = "Product with SKU '{sku}' already exists"
    CATEGORY_NOT_FOUND = "Category with ID '{category_id}' not found"


class CreateProductHandler:
    """Handler for CreateProduct command.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Repositories and save
        - CurrentUserProtocol: Actor recorded in created_by
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        current_user: CurrentUserProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            unit_of_work: Unit of work for the current request.
            current_user: Accessor for the acting user.
            logger: Logger for structured logging.
        """
        self._unit_of_work = unit_of_work
        self._current_user = current_user
        self._logger = logger

    async def handle(self, cmd: CreateProduct) -> Result[UUID, str]:
        """Handle CreateProduct command.

        Args:
            cmd: CreateProduct command.

        Returns:
            Success(UUID): ID of the new product.
            Failure(error): SKU already used, or category not found.
        """
        products = self._unit_of_work.repository(Product)
        categories = self._unit_of_work.repository(Category)

        # The unique index covers soft-deleted rows too
        if await products.find_including_deleted(Product.sku == cmd.sku):
            return Failure(error=CreateProductError.SKU_ALREADY_EXISTS.format(sku=cmd.sku))

        if not await categories.any(Category.id == cmd.category_id):
            return Failure(
                error=CreateProductError.CATEGORY_NOT_FOUND.format(
                    category_id=cmd.category_id
                )
            )

        product = Product(
            id=uuid7(),
            name=cmd.name,
            description=cmd.description,
            sku=cmd.sku,
            price=cmd.price,
            stock_quantity=cmd.stock_quantity,
            category_id=cmd.category_id,
            is_active=True,
            created_by=resolve_actor(self._current_user),
        )
        await products.add(product)
        await self._unit_of_work.save_changes()

        self._logger.info(
            "Product created",
            product_id=str(product.id),
            sku=product.sku,
        )
        return Success(value=product.id)
