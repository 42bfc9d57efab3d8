"""DeleteProduct command handler.

Soft delete: the product row is kept, flagged as deleted, and excluded from
every default read afterwards.
"""

from src.application.commands.product_commands import DeleteProduct
from src.application.services.current_actor import resolve_actor
from src.core.result import Failure, Result, Success
from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.infrastructure.persistence.models import Product


class DeleteProductError:
    """DeleteProduct-specific errors."""

    PRODUCT_NOT_FOUND = "Product with ID '{product_id}' not found"


class DeleteProductHandler:
    """Handler for DeleteProduct command.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Repositories and save
        - CurrentUserProtocol: Actor recorded in deleted_by
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        current_user: CurrentUserProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._current_user = current_user
        self._logger = logger

    async def handle(self, cmd: DeleteProduct) -> Result[bool, str]:
        """Handle DeleteProduct command.

        Returns:
            Success(True): Product soft-deleted.
            Failure(error): Product not found (or already deleted).
        """
        products = self._unit_of_work.repository(Product)

        product = await products.get_by_id(cmd.product_id)
        if product is None:
            return Failure(
                error=DeleteProductError.PRODUCT_NOT_FOUND.format(product_id=cmd.product_id)
            )

        actor = resolve_actor(self._current_user)
        product.mark_deleted(actor)
        product.touch(actor)
        await products.update(product)
        await self._unit_of_work.save_changes()

        self._logger.info("Product deleted", product_id=str(product.id), deleted_by=actor)
        return Success(value=True)
