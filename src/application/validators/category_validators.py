"""Category request validators."""

from src.application.commands.category_commands import CreateCategory
from src.core.constants import CATEGORY_DESCRIPTION_MAX_LENGTH, CATEGORY_NAME_MAX_LENGTH
from src.core.validation import collect_errors, validate_max_length, validate_not_empty


class CreateCategoryValidator:
    """Rules for CreateCategory: name required (max 100), description max 500.

    The name is checked as stored, i.e. without surrounding whitespace.
    """

    async def validate(self, request: CreateCategory) -> dict[str, list[str]]:
        name = request.name.strip() if request.name else request.name
        return collect_errors(
            validate_not_empty(name, "name", "Category name"),
            validate_max_length(name, CATEGORY_NAME_MAX_LENGTH, "name", "Category name"),
            validate_max_length(
                request.description,
                CATEGORY_DESCRIPTION_MAX_LENGTH,
                "description",
                "Description",
            ),
        )
