"""Identity provider backed by configuration"""

from loguru import logger

from tradeflow.domain.repositories import UserIdentity
from tradeflow.shared.exceptions import IdentityError


class StaticIdentityProvider:
    """Reports a fixed, pre-authenticated user until sign-out"""

    def __init__(self, user: UserIdentity):
        self._user: UserIdentity | None = user

    def current_user(self) -> UserIdentity | None:
        return self._user

    async def sign_out(self) -> None:
        if self._user is None:
            raise IdentityError("No user is signed in")
        logger.debug(f"Signing out {self._user.user_id}")
        self._user = None
