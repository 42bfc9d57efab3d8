"""Dispatcher factory.

Builds the request-scoped Dispatcher that runs commands and queries through
the behavior pipeline against one unit of work.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.application.cqrs.dispatcher import Dispatcher
    from src.domain.protocols.current_user_protocol import CurrentUserProtocol
    from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol


def create_dispatcher(
    unit_of_work: "UnitOfWorkProtocol",
    current_user: "CurrentUserProtocol | None" = None,
) -> "Dispatcher":
    """Create a dispatcher for one request (request-scoped).

    Args:
        unit_of_work: Unit of work of the request.
        current_user: Acting user (None resolves to the system actor).

    Returns:
        Dispatcher wired to the full command and query registry.

    Usage:
        async with create_unit_of_work() as uow:
            dispatcher = create_dispatcher(uow, CurrentUser(username="alice"))
            result = await dispatcher.dispatch(GetProductById(product_id=pid))
    """
    from src.application.cqrs.dispatcher import Dispatcher
    from src.core.container.infrastructure import get_logger

    return Dispatcher(unit_of_work, get_logger(), current_user)
