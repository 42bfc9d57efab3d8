"""Static current-user accessor.

The boundary (HTTP middleware, CLI, job runner) resolves who is acting and
builds one CurrentUser per request. Anonymous callers use ``CurrentUser()``.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Current user resolved by the caller.

    Implements CurrentUserProtocol.

    Attributes:
        username: Display name of the authenticated user, or None.
    """

    username: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return bool(self.username and self.username.strip())
