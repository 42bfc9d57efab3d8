"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (CreateProduct, DeleteProduct).

Each command has a corresponding handler that contains the business logic
to execute the command. The dispatcher runs every command inside a
transaction.
"""

from src.application.commands.category_commands import CreateCategory
from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)

__all__ = [
    "CreateCategory",
    "CreateProduct",
    "DeleteProduct",
    "UpdateProduct",
]
