"""CurrentUserProtocol - accessor for the acting user.

Handlers record who created, updated, or deleted an entity. The identity
comes from the boundary (JWT claims, CLI user, background job name); this
protocol is all the application layer sees of it.

An unauthenticated caller has ``username is None``. Handlers must never write
None into a required audit column; use
``src.application.services.current_actor.resolve_actor`` which falls back to
the system actor.
"""

from typing import Protocol


class CurrentUserProtocol(Protocol):
    """Accessor for the user performing the current request."""

    @property
    def username(self) -> str | None:
        """Display name of the authenticated user, or None."""
        ...

    @property
    def is_authenticated(self) -> bool:
        """Whether an authenticated user is present."""
        ...
