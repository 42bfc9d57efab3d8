"""Current actor resolution.

Audit columns (created_by, updated_by, deleted_by) are required, so handlers
never write the raw username. They go through resolve_actor(), which falls
back to the configured system actor when nobody is signed in.
"""

from src.core.config import settings
from src.domain.protocols.current_user_protocol import CurrentUserProtocol


def resolve_actor(current_user: CurrentUserProtocol | None) -> str:
    """Return the name to record in audit columns.

    Args:
        current_user: Accessor for the acting user (None for background work).

    Returns:
        The username when authenticated, otherwise the system actor
        ("System" by default).
    """
    if current_user is not None and current_user.is_authenticated:
        username = current_user.username
        if username:
            return username
    return settings.system_actor
