"""CQRS - request contracts, registry and dispatcher.

This package catalogs ALL commands and queries with their metadata and
dispatches them through the behavior pipeline.

Adding new commands/queries:
1. Define command/query dataclass deriving from Command/Query
2. Create handler class in handlers/ directory (and validators if needed)
3. Add entry to COMMAND_REGISTRY or QUERY_REGISTRY
4. Run tests - validate_registry_consistency() reports drift

Note: the registry and dispatcher import every handler, so they are not
re-exported here; import them from their modules.
"""

from src.application.cqrs.metadata import (
    CommandMetadata,
    CQRSCategory,
    QueryMetadata,
)
from src.application.cqrs.requests import Command, Query, Request

__all__ = [
    "Command",
    "CommandMetadata",
    "CQRSCategory",
    "Query",
    "QueryMetadata",
    "Request",
]
