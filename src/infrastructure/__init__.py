"""Infrastructure layer - Adapters for the domain protocols.

This layer contains implementations of domain protocols (ports):
- persistence/: SQLAlchemy database, generic repository, unit of work
- logging/: structlog console adapter
- identity/: Current-user accessor

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
