"""Subscription store protocol"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class SubscriptionStore(Protocol):
    """Durable mapping of user to followed symbols

    Implementations raise ``PersistenceError`` when a call fails.
    """

    async def list_symbols(self, user_id: str) -> list[str]:
        """Get followed symbols for a user, oldest first"""
        ...

    async def insert(self, user_id: str, symbol: str) -> None:
        """Persist a follow"""
        ...

    async def delete(self, user_id: str, symbol: str) -> None:
        """Persist an unfollow"""
        ...
