"""Request validators.

A validator is any object with ``async validate(request) -> dict[str,
list[str]]``. Validators are registered per request type in the CQRS
registry and run by ValidationBehavior before the handler. An empty map
means the request is valid.
"""

from src.application.validators.category_validators import CreateCategoryValidator
from src.application.validators.product_validators import (
    CreateProductValidator,
    DeleteProductValidator,
    GetProductByIdValidator,
    ListProductsValidator,
    UpdateProductValidator,
)

__all__ = [
    "CreateCategoryValidator",
    "CreateProductValidator",
    "DeleteProductValidator",
    "GetProductByIdValidator",
    "ListProductsValidator",
    "UpdateProductValidator",
]
