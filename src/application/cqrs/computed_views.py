"""Read-only lookups over the command and query registries.

The registries themselves are plain tuples; everything here is derived
from them on each call. Compliance tests use these helpers to keep the
registry, handler naming and validator wiring from drifting apart.
"""

from collections import Counter
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from src.application.cqrs.metadata import (
        CommandMetadata,
        CQRSCategory,
        QueryMetadata,
    )


def _registries() -> tuple[tuple["CommandMetadata", ...], tuple["QueryMetadata", ...]]:
    # Imported late: the registry imports every handler module
    from src.application.cqrs.registry import COMMAND_REGISTRY, QUERY_REGISTRY

    return tuple(COMMAND_REGISTRY), tuple(QUERY_REGISTRY)


def _find(entries: tuple[Any, ...], request_class: type) -> Any:
    return next((meta for meta in entries if meta.request_class is request_class), None)


def get_all_commands() -> list[type]:
    """Command classes, in registry order."""
    commands, _ = _registries()
    return [meta.command_class for meta in commands]


def get_all_queries() -> list[type]:
    """Query classes, in registry order."""
    _, queries = _registries()
    return [meta.query_class for meta in queries]


def get_commands_by_category(category: "CQRSCategory") -> list["CommandMetadata"]:
    commands, _ = _registries()
    return [meta for meta in commands if meta.category == category]


def get_queries_by_category(category: "CQRSCategory") -> list["QueryMetadata"]:
    _, queries = _registries()
    return [meta for meta in queries if meta.category == category]


def get_command_metadata(command_class: type) -> "CommandMetadata | None":
    """Registry entry for ``command_class``, or None when it is not a command.

    Example:
        >>> get_command_metadata(CreateProduct).handler_class.__name__
        'CreateProductHandler'
    """
    commands, _ = _registries()
    return _find(commands, command_class)


def get_query_metadata(query_class: type) -> "QueryMetadata | None":
    """Registry entry for ``query_class``, or None when it is not a query."""
    _, queries = _registries()
    return _find(queries, query_class)


def get_statistics() -> dict[str, int | dict[str, int]]:
    """Counts of registered requests, grouped for reporting.

    Keys: total_commands, total_queries, total_operations,
    commands_by_category, queries_by_category, paginated_queries and
    total_validators.
    """
    commands, queries = _registries()

    return {
        "total_commands": len(commands),
        "total_queries": len(queries),
        "total_operations": len(commands) + len(queries),
        "commands_by_category": dict(Counter(meta.category.value for meta in commands)),
        "queries_by_category": dict(Counter(meta.category.value for meta in queries)),
        "paginated_queries": sum(1 for meta in queries if meta.is_paginated),
        "total_validators": sum(
            len(meta.validator_classes) for meta in (*commands, *queries)
        ),
    }


def validate_registry_consistency() -> list[str]:
    """Describe every registry problem found; an empty list means none.

    Checked: duplicate registrations, a class registered as both command
    and query, handlers without ``handle`` and validators without
    ``validate``.
    """
    commands, queries = _registries()
    problems: list[str] = []

    command_classes = [meta.command_class for meta in commands]
    query_classes = [meta.query_class for meta in queries]

    if len(command_classes) != len(set(command_classes)):
        problems.append("Duplicate command classes in COMMAND_REGISTRY")
    if len(query_classes) != len(set(query_classes)):
        problems.append("Duplicate query classes in QUERY_REGISTRY")
    if set(command_classes) & set(query_classes):
        problems.append("Request classes registered as both command and query")

    labelled = [("Command", meta) for meta in commands] + [
        ("Query", meta) for meta in queries
    ]
    for kind, meta in labelled:
        if not hasattr(meta.handler_class, "handle"):
            problems.append(
                f"{kind} handler {meta.handler_class.__name__} missing handle() method"
            )
        problems.extend(
            f"Validator {validator_class.__name__} missing validate() method"
            for validator_class in meta.validator_classes
            if not hasattr(validator_class, "validate")
        )

    return problems
