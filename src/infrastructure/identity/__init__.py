"""Identity adapters implementing CurrentUserProtocol."""

from src.infrastructure.identity.current_user import CurrentUser

__all__ = ["CurrentUser"]
