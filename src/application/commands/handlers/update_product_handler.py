"""UpdateProduct command handler.

Replaces the editable fields of a live product. When the command carries a
row_version the save only matches that version, so a concurrent edit makes
save_changes() raise ConcurrencyConflictError.
"""

from src.application.commands.product_commands import UpdateProduct
from src.application.services.current_actor import resolve_actor
from src.core.result import Failure, Result, Success
from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.infrastructure.persistence.models import Category, Product


class UpdateProductError:
    """UpdateProduct-specific errors."""

    PRODUCT_NOT_FOUND = "Product with ID '{product_id}' not found"
    SKU_ALREADY_EXISTS = "Product with SKU '{sku}' already exists"
    CATEGORY_NOT_FOUND = "Category with ID '{category_id}' not found"


class UpdateProductHandler:
    """Handler for UpdateProduct command.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Repositories and save
        - CurrentUserProtocol: Actor recorded in updated_by
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._current_user = current_user

    async def handle(self, cmd: UpdateProduct) -> Result[bool, str]:
        """Handle UpdateProduct command.

        Returns:
            Success(True): Product updated.
            Failure(error): Product missing, SKU taken by another product,
                or category not found.

        Raises:
            ConcurrencyConflictError: row_version is stale.
        """
        products = self._unit_of_work.repository(Product)
        categories = self._unit_of_work.repository(Category)

        product = await products.get_by_id(cmd.product_id)
        if product is None:
            return Failure(
                error=UpdateProductError.PRODUCT_NOT_FOUND.format(product_id=cmd.product_id)
            )

        if cmd.sku != product.sku:
            taken = await products.find_including_deleted(
                Product.sku == cmd.sku,
                Product.id != cmd.product_id,
            )
            if taken:
                return Failure(error=UpdateProductError.SKU_ALREADY_EXISTS.format(sku=cmd.sku))

        if not await categories.any(Category.id == cmd.category_id):
            return Failure(
                error=UpdateProductError.CATEGORY_NOT_FOUND.format(
                    category_id=cmd.category_id
                )
            )

        product.name = cmd.name
        product.description = cmd.description
        product.sku = cmd.sku
        product.price = cmd.price
        product.stock_quantity = cmd.stock_quantity
        product.is_active = cmd.is_active
        product.category_id = cmd.category_id
        product.touch(resolve_actor(self._current_user))

        await products.update(product, row_version=cmd.row_version)
        await self._unit_of_work.save_changes()

        return Success(value=True)
