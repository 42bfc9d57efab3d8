"""Request dispatcher.

Resolves the single handler registered for a request type, wraps it in the
fixed behavior chain and runs it:

    Performance(Validation(Transaction(handler)))

One dispatcher serves one unit of work, so it is created per request (see
``src.core.container.create_dispatcher``) and must not be shared between
concurrent tasks.

Usage:
    dispatcher = create_dispatcher(unit_of_work, current_user)
    result = await dispatcher.dispatch(CreateProduct(...))
    match result:
        case Success(value=product_id): ...
        case Failure(error=message): ...
        case ValidationFailure(errors=errors): ...
"""

from collections.abc import Iterable
from typing import Any, TypeVar

from src.application.behaviors import (
    PerformanceBehavior,
    TransactionBehavior,
    ValidationBehavior,
    build_pipeline,
)
from src.application.cqrs.metadata import CommandMetadata, QueryMetadata
from src.application.cqrs.requests import Request
from src.core.container.handler_factory import create_handler
from src.core.result import Result
from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

TResponse = TypeVar("TResponse")


class HandlerNotFoundError(LookupError):
    """No handler is registered for the dispatched request type."""

    def __init__(self, request_type: type) -> None:
        super().__init__(f"No handler registered for {request_type.__name__}")
        self.request_type = request_type


class Dispatcher:
    """Dispatch commands and queries through the behavior pipeline.

    Args:
        unit_of_work: Unit of work for the current request.
        logger: Structured logger shared by behaviors and handlers.
        current_user: Acting user (None for system work).
        registrations: Registry entries to dispatch from (defaults to
            COMMAND_REGISTRY + QUERY_REGISTRY).
        slow_request_threshold_ms: Override for the performance threshold.

    Raises:
        ValueError: A request type is registered more than once.
    """

    def __init__(
        self,
        unit_of_work: UnitOfWorkProtocol,
        logger: LoggerProtocol,
        current_user: CurrentUserProtocol | None = None,
        *,
        registrations: Iterable[CommandMetadata | QueryMetadata] | None = None,
        slow_request_threshold_ms: float | None = None,
    ) -> None:
        if registrations is None:
            from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

            registrations = [*COMMAND_REGISTRY, *QUERY_REGISTRY]

        self._registrations: dict[type, CommandMetadata | QueryMetadata] = {}
        for metadata in registrations:
            request_class = metadata.request_class
            if request_class in self._registrations:
                raise ValueError(f"{request_class.__name__} is registered more than once")
            self._registrations[request_class] = metadata

        self._unit_of_work = unit_of_work
        self._logger = logger
        self._current_user = current_user
        self._slow_request_threshold_ms = slow_request_threshold_ms

    def is_registered(self, request_type: type) -> bool:
        return request_type in self._registrations

    async def dispatch(self, request: Request[TResponse]) -> Result[TResponse, Any]:
        """Run request through the pipeline and return its result.

        Args:
            request: Command or query instance.

        Returns:
            Success, Failure or ValidationFailure.

        Raises:
            HandlerNotFoundError: No handler registered for type(request).
            ConcurrencyConflictError: A command hit a stale row version.
            Exception: Infrastructure faults propagate after rollback.
        """
        metadata = self._registrations.get(type(request))
        if metadata is None:
            raise HandlerNotFoundError(type(request))

        handler = create_handler(
            metadata.handler_class,
            unit_of_work=self._unit_of_work,
            current_user=self._current_user,
            logger=self._logger,
        )
        validators = [validator_class() for validator_class in metadata.validator_classes]

        pipeline = build_pipeline(
            [
                PerformanceBehavior(self._logger, self._slow_request_threshold_ms),
                ValidationBehavior(validators, self._logger),
                TransactionBehavior(self._unit_of_work, self._logger),
            ],
            handler.handle,  # type: ignore[attr-defined]
        )
        return await pipeline(request)
