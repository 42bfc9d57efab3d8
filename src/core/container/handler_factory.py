"""Builds handlers by reading their constructor annotations.

Handlers declare what they need as typed ``__init__`` parameters and never
look anything up themselves. For each parameter the factory picks, in
order:

1. an explicit keyword override passed to ``create_handler``
2. the request's unit of work or acting user (matched by type name)
3. a process-wide singleton such as the logger
4. ``None`` when the annotation is optional

Anything else is a wiring mistake and raises ``ValueError``. Matching is by
type *name* so string annotations and ``X | None`` work the same as plain
classes.

Usage:
    handler = create_handler(
        CreateProductHandler,
        unit_of_work=uow,
        current_user=current_user,
    )
"""

import inspect
from types import UnionType
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

from src.domain.protocols.current_user_protocol import CurrentUserProtocol
from src.domain.protocols.unit_of_work_protocol import UnitOfWorkProtocol

T = TypeVar("T")


# =============================================================================
# Resolvable types
# =============================================================================

# Type name -> keyword of create_handler() that supplies it
REQUEST_SCOPED_TYPES: dict[str, str] = {
    "UnitOfWorkProtocol": "unit_of_work",
    "SqlAlchemyUnitOfWork": "unit_of_work",
    "CurrentUserProtocol": "current_user",
    "CurrentUser": "current_user",
}

# Type name -> container function returning the shared instance
SINGLETON_TYPES: dict[str, str] = {
    "LoggerProtocol": "get_logger",
}


def _is_union(annotation: Any) -> bool:
    return get_origin(annotation) in (Union, UnionType)


def get_type_name(annotation: Any) -> str:
    """Bare type name behind an annotation.

    ``Optional[X]`` and ``X | None`` give ``X``'s name; dotted string
    annotations give their last segment.
    """
    if annotation is None:
        return "None"
    if _is_union(annotation):
        inner = [arg for arg in get_args(annotation) if arg is not type(None)]
        return get_type_name(inner[0]) if inner else "None"
    if isinstance(annotation, type):
        return annotation.__name__
    if isinstance(annotation, str):
        return annotation.rsplit(".", 1)[-1]
    return str(annotation).rsplit(".", 1)[-1].rstrip("'>")


def _constructor_hints(handler_class: type) -> dict[str, Any]:
    init = handler_class.__init__
    try:
        hints = get_type_hints(init)
    except (NameError, TypeError):
        # Unresolvable forward reference: keep the raw annotations
        hints = {
            name: param.annotation
            for name, param in inspect.signature(init).parameters.items()
            if param.annotation is not inspect.Parameter.empty
        }
    hints.pop("return", None)
    hints.pop("self", None)
    return hints


def analyze_handler_dependencies(handler_class: type) -> dict[str, dict[str, Any]]:
    """Describe each annotated ``__init__`` parameter of ``handler_class``.

    Returns:
        Parameter name -> {"type_name", "annotation", "is_optional"}.
    """
    return {
        name: {
            "type_name": get_type_name(annotation),
            "annotation": annotation,
            "is_optional": _is_union(annotation) and type(None) in get_args(annotation),
        }
        for name, annotation in _constructor_hints(handler_class).items()
    }


def _get_singleton_instance(type_name: str) -> Any:
    # Late import: infrastructure reads settings on import
    from src.core.container import infrastructure

    try:
        factory_name = SINGLETON_TYPES[type_name]
    except KeyError:
        raise ValueError(f"Unknown singleton type: {type_name}") from None
    return getattr(infrastructure, factory_name)()


def create_handler(
    handler_class: type[T],
    *,
    unit_of_work: UnitOfWorkProtocol,
    current_user: CurrentUserProtocol | None = None,
    **overrides: Any,
) -> T:
    """Instantiate ``handler_class`` for one request.

    Args:
        handler_class: Handler to build.
        unit_of_work: The request's unit of work.
        current_user: The acting user, if any.
        **overrides: Values for specific parameters, by parameter name.

    Raises:
        ValueError: A required parameter has no source.
    """
    request_values: dict[str, Any] = {
        "unit_of_work": unit_of_work,
        "current_user": current_user,
    }
    kwargs: dict[str, Any] = {}

    for name, info in analyze_handler_dependencies(handler_class).items():
        type_name = info["type_name"]

        if name in overrides:
            kwargs[name] = overrides[name]
        elif type_name in REQUEST_SCOPED_TYPES:
            value = request_values[REQUEST_SCOPED_TYPES[type_name]]
            if value is None and not info["is_optional"]:
                raise ValueError(
                    f"Dependency '{name}' of type '{type_name}' "
                    f"is required by {handler_class.__name__} but was not provided"
                )
            kwargs[name] = value
        elif type_name in SINGLETON_TYPES:
            kwargs[name] = _get_singleton_instance(type_name)
        elif info["is_optional"]:
            kwargs[name] = None
        else:
            raise ValueError(
                f"Cannot resolve dependency '{name}' "
                f"of type '{type_name}' for {handler_class.__name__}"
            )

    return handler_class(**kwargs)


def get_supported_dependencies() -> dict[str, list[str]]:
    """Type names the factory can resolve, grouped by lifetime."""
    return {
        "request_scoped": list(REQUEST_SCOPED_TYPES),
        "singletons": list(SINGLETON_TYPES),
    }
