"""Behavior pipeline composition.

A behavior wraps the rest of the pipeline: it receives the request and a
zero-argument ``next_`` coroutine function that runs the remaining
behaviors and finally the handler. Behaviors are composed once per dispatch
into a single callable, outermost first:

    Performance -> Validation -> Transaction -> handler
"""

from collections.abc import Awaitable, Callable, Sequence
from functools import partial
from typing import Any, Protocol

type NextStep = Callable[[], Awaitable[Any]]
type RequestHandlerFunc = Callable[[Any], Awaitable[Any]]


class PipelineBehavior(Protocol):
    """Cross-cutting stage around request handling."""

    async def handle(self, request: Any, next_: NextStep) -> Any:
        """Run this stage and (normally) delegate to next_()."""
        ...


class Validator(Protocol):
    """Request validator run by ValidationBehavior."""

    async def validate(self, request: Any) -> dict[str, list[str]]:
        """Return field -> messages; empty when the request is valid."""
        ...


def build_pipeline(
    behaviors: Sequence[PipelineBehavior],
    handler: RequestHandlerFunc,
) -> RequestHandlerFunc:
    """Compose behaviors around a handler.

    Args:
        behaviors: Behaviors in execution order (first is outermost).
        handler: Terminal step, usually ``handler_instance.handle``.

    Returns:
        Coroutine function taking the request and returning the result.
    """
    stages = tuple(behaviors)

    async def run(request: Any) -> Any:
        async def invoke(index: int) -> Any:
            if index == len(stages):
                return await handler(request)
            return await stages[index].handle(request, partial(invoke, index + 1))

        return await invoke(0)

    return run
