"""Registry entry types for commands and queries.

One entry ties a request class to its handler and validators. Entries are
frozen and keyword-only; they are built once at import time and the
dispatcher only ever reads them.
"""

from dataclasses import dataclass
from enum import Enum

from src.application.cqrs.requests import Command, Query


class CQRSCategory(str, Enum):
    """Aggregate a request belongs to."""

    CATEGORY = "category"
    PRODUCT = "product"


@dataclass(frozen=True, kw_only=True)
class CommandMetadata:
    """Registration of a state-changing request.

    The dispatcher wraps every command in a transaction, so
    ``requires_transaction`` is always True here.

    Example:
        CommandMetadata(
            command_class=CreateProduct,
            handler_class=CreateProductHandler,
            category=CQRSCategory.PRODUCT,
            validator_classes=(CreateProductValidator,),
            description="Create a product in an existing category",
        )
    """

    command_class: type
    handler_class: type
    category: CQRSCategory
    validator_classes: tuple[type, ...] = ()
    description: str = ""

    def __post_init__(self) -> None:
        if not issubclass(self.command_class, Command):
            raise ValueError(
                f"Command {self.command_class.__name__} must derive from Command"
            )

    @property
    def request_class(self) -> type:
        return self.command_class

    @property
    def requires_transaction(self) -> bool:
        return True


@dataclass(frozen=True, kw_only=True)
class QueryMetadata:
    """Registration of a read-only request.

    Queries run against whatever state the unit of work is in and never
    open a transaction. ``is_paginated`` marks handlers that return a
    PaginatedResult.
    """

    query_class: type
    handler_class: type
    category: CQRSCategory
    validator_classes: tuple[type, ...] = ()
    is_paginated: bool = False
    description: str = ""

    def __post_init__(self) -> None:
        if not issubclass(self.query_class, Query):
            raise ValueError(f"Query {self.query_class.__name__} must derive from Query")

    @property
    def request_class(self) -> type:
        return self.query_class

    @property
    def requires_transaction(self) -> bool:
        return False
