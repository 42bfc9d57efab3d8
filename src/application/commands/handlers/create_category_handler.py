"""CreateCategory command handler.

Architecture:
- Application layer handler (orchestrates business logic)
- Works through the unit of work injected by the dispatcher
- Uses Result types for expected failures
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.category_commands import CreateCategory
from src.application.services.current_actor import resolve_actor
from src.core.result import Failure, Result, Success
from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol
from src.infrastructure.persistence.models import Category


class CreateCategoryError:
    """CreateCategory-specific errors."""

    NAME_ALREADY_EXISTS = "Category with name '{name}' already exists"


class CreateCategoryHandler:
    """Handler for CreateCategory command.

    Dependencies (injected via constructor):
        - UnitOfWorkProtocol: Repositories and save
        - CurrentUserProtocol: Actor recorded in created_by
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        current_user: CurrentUserProtocol,
    ) -> None:
        self._unit_of_work = unit_of_work
        self._current_user = current_user

    async def handle(self, cmd: CreateCategory) -> Result[UUID, str]:
        """Create the category unless the name is taken.

        Returns:
            Success(UUID): ID of the new category.
            Failure(error): A category with that name already exists.
        """
        categories = self._unit_of_work.repository(Category)
        name = cmd.name.strip()

        # Soft-deleted categories keep their name in the unique index
        if await categories.find_including_deleted(Category.name == name):
            return Failure(error=CreateCategoryError.NAME_ALREADY_EXISTS.format(name=name))

        category = Category(
            id=uuid7(),
            name=name,
            description=cmd.description,
            created_by=resolve_actor(self._current_user),
        )
        await categories.add(category)
        await self._unit_of_work.save_changes()

        return Success(value=category.id)
