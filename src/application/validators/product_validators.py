"""Product request validators.

Field rules shared by CreateProduct and UpdateProduct:
    - name: required, max 200 characters
    - sku: required, max 50 characters, uppercase letters, digits and hyphens
    - price: greater than 0 and less than 1,000,000
    - stock_quantity: not negative
    - category_id: required
    - description: optional, max 2000 characters

Each validator returns a field-to-messages map; an empty map means valid.
"""

from typing import Any

from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)
from src.application.queries.product_queries import GetProductById, ListProducts
from src.core.config import settings
from src.core.constants import (
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_PRICE_LIMIT,
    PRODUCT_SKU_MAX_LENGTH,
    PRODUCT_SKU_PATTERN,
)
from src.core.errors import ValidationError
from src.core.result import Result
from src.core.validation import (
    collect_errors,
    validate_max_length,
    validate_not_empty,
    validate_pattern,
    validate_range,
)


class ProductValidationMessage:
    """Messages that are not derived from a field label."""

    SKU_FORMAT = "SKU must contain only uppercase letters, numbers, and hyphens"
    PRICE_POSITIVE = "Price must be greater than 0"
    PRICE_LIMIT = "Price must be less than 1,000,000"
    STOCK_NEGATIVE = "Stock quantity cannot be negative"


def _product_field_rules(
    request: CreateProduct | UpdateProduct,
) -> list[Result[Any, ValidationError]]:
    rules: list[Result[Any, ValidationError]] = [
        validate_not_empty(request.name, "name", "Product name"),
        validate_max_length(request.name, PRODUCT_NAME_MAX_LENGTH, "name", "Product name"),
        validate_not_empty(request.sku, "sku", "SKU"),
        validate_max_length(request.sku, PRODUCT_SKU_MAX_LENGTH, "sku", "SKU"),
    ]
    # Blank SKUs are already reported as required
    if request.sku and request.sku.strip():
        rules.append(
            validate_pattern(
                request.sku,
                PRODUCT_SKU_PATTERN,
                "sku",
                ProductValidationMessage.SKU_FORMAT,
            )
        )
    rules += [
        validate_range(
            request.price,
            "price",
            greater_than=0,
            message=ProductValidationMessage.PRICE_POSITIVE,
        ),
        validate_range(
            request.price,
            "price",
            less_than=PRODUCT_PRICE_LIMIT,
            message=ProductValidationMessage.PRICE_LIMIT,
        ),
        validate_range(
            request.stock_quantity,
            "stock_quantity",
            at_least=0,
            message=ProductValidationMessage.STOCK_NEGATIVE,
        ),
        validate_not_empty(request.category_id, "category_id", "Category"),
        validate_max_length(
            request.description,
            PRODUCT_DESCRIPTION_MAX_LENGTH,
            "description",
            "Description",
        ),
    ]
    return rules


class CreateProductValidator:
    """Rules for CreateProduct."""

    async def validate(self, request: CreateProduct) -> dict[str, list[str]]:
        return collect_errors(*_product_field_rules(request))


class UpdateProductValidator:
    """Rules for UpdateProduct: product ID required plus the field rules."""

    async def validate(self, request: UpdateProduct) -> dict[str, list[str]]:
        return collect_errors(
            validate_not_empty(request.product_id, "product_id", "Product ID"),
            *_product_field_rules(request),
        )


class DeleteProductValidator:
    async def validate(self, request: DeleteProduct) -> dict[str, list[str]]:
        return collect_errors(
            validate_not_empty(request.product_id, "product_id", "Product ID"),
        )


class GetProductByIdValidator:
    async def validate(self, request: GetProductById) -> dict[str, list[str]]:
        return collect_errors(
            validate_not_empty(request.product_id, "product_id", "Product ID"),
        )


class ListProductsValidator:
    """Paging rules: page number >= 1, page size between 1 and the maximum."""

    async def validate(self, request: ListProducts) -> dict[str, list[str]]:
        max_page_size = settings.max_page_size
        return collect_errors(
            validate_range(
                request.page_number,
                "page_number",
                at_least=1,
                message="Page number must be at least 1",
            ),
            validate_range(
                request.page_size,
                "page_size",
                at_least=1,
                at_most=max_page_size,
                message=f"Page size must be between 1 and {max_page_size}",
            ),
        )
