"""Identity provider protocol"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class UserIdentity:
    """Authenticated user as reported by the identity provider"""

    user_id: str
    email: str = ""


@runtime_checkable
class IdentityProvider(Protocol):
    """Source of the authenticated user"""

    def current_user(self) -> UserIdentity | None:
        """Get the signed-in user, or None when signed out"""
        ...

    async def sign_out(self) -> None:
        """Terminate the session. Raises IdentityError on failure."""
        ...
