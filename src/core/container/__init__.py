"""Container module - Centralized dependency injection.

This module re-exports all factory functions from submodules:

    from src.core.container import get_database, create_dispatcher, ...

The container is organized into modules by concern:
- infrastructure: Core services (database, logging) and the unit of work
- handler_factory: Auto-wiring of handler constructor dependencies
- dispatch: Request-scoped dispatcher
"""

# Infrastructure services
from src.core.container.infrastructure import (
    create_unit_of_work,
    get_database,
    get_logger,
)

# Handler auto-wiring
from src.core.container.handler_factory import create_handler

# Dispatcher
from src.core.container.dispatch import create_dispatcher

__all__ = [
    # Infrastructure
    "get_database",
    "get_logger",
    "create_unit_of_work",
    # Handlers
    "create_handler",
    # Dispatch
    "create_dispatcher",
]
