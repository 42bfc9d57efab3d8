"""CQRS Registry - Single Source of Truth for Commands and Queries.

This registry catalogs ALL commands and queries in the system with their metadata.
Used for:
- Dispatcher wiring (request type -> handler + validators)
- Validation tests (verify no drift between commands/handlers)
- Gap detection (missing handlers, duplicate registrations)

Architecture:
- Application layer (commands/queries are use cases)
- Imported by the dispatcher for handler resolution
- Verified by tests to catch drift

Adding new commands/queries:
1. Define command/query dataclass in appropriate *_commands.py/*_queries.py file
2. Create handler class in handlers/ directory (and validators if needed)
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY below
4. Run tests - they'll tell you what's missing
"""

from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all commands
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.category_commands import CreateCategory
from src.application.commands.product_commands import (
    CreateProduct,
    DeleteProduct,
    UpdateProduct,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all command handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.commands.handlers.create_category_handler import (
    CreateCategoryHandler,
)
from src.application.commands.handlers.create_product_handler import (
    CreateProductHandler,
)
from src.application.commands.handlers.delete_product_handler import (
    DeleteProductHandler,
)
from src.application.commands.handlers.update_product_handler import (
    UpdateProductHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all queries and query handlers
# ═══════════════════════════════════════════════════════════════════════════
from src.application.queries.product_queries import GetProductById, ListProducts
from src.application.queries.handlers.get_product_handler import GetProductByIdHandler
from src.application.queries.handlers.list_products_handler import (
    ListProductsHandler,
)

# ═══════════════════════════════════════════════════════════════════════════
# Import all validators
# ═══════════════════════════════════════════════════════════════════════════
from src.application.validators import (
    CreateCategoryValidator,
    CreateProductValidator,
    DeleteProductValidator,
    GetProductByIdValidator,
    ListProductsValidator,
    UpdateProductValidator,
)


COMMAND_REGISTRY: list[CommandMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Category Commands (1 command)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateCategory,
        handler_class=CreateCategoryHandler,
        category=CQRSCategory.CATEGORY,
        validator_classes=(CreateCategoryValidator,),
        description="Create a product category with a unique name",
    ),
    # ═══════════════════════════════════════════════════════════════════════
    # Product Commands (3 commands)
    # ═══════════════════════════════════════════════════════════════════════
    CommandMetadata(
        command_class=CreateProduct,
        handler_class=CreateProductHandler,
        category=CQRSCategory.PRODUCT,
        validator_classes=(CreateProductValidator,),
        description="Create a product in an existing category",
    ),
    CommandMetadata(
        command_class=UpdateProduct,
        handler_class=UpdateProductHandler,
        category=CQRSCategory.PRODUCT,
        validator_classes=(UpdateProductValidator,),
        description="Update a product, optionally checking its row version",
    ),
    CommandMetadata(
        command_class=DeleteProduct,
        handler_class=DeleteProductHandler,
        category=CQRSCategory.PRODUCT,
        validator_classes=(DeleteProductValidator,),
        description="Soft-delete a product",
    ),
]


QUERY_REGISTRY: list[QueryMetadata] = [
    # ═══════════════════════════════════════════════════════════════════════
    # Product Queries (2 queries)
    # ═══════════════════════════════════════════════════════════════════════
    QueryMetadata(
        query_class=GetProductById,
        handler_class=GetProductByIdHandler,
        category=CQRSCategory.PRODUCT,
        validator_classes=(GetProductByIdValidator,),
        description="Get a live product with its category name",
    ),
    QueryMetadata(
        query_class=ListProducts,
        handler_class=ListProductsHandler,
        category=CQRSCategory.PRODUCT,
        validator_classes=(ListProductsValidator,),
        is_paginated=True,
        description="List live products with search, category filter and paging",
    ),
]
