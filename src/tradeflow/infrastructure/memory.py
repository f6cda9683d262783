"""In-memory subscription store"""

from tradeflow.shared.exceptions import PersistenceError


class InMemorySubscriptionStore:
    """Dictionary-backed store for demos and tests

    Mirrors the SQL store: inserting a duplicate fails, deleting a missing
    subscription does not.
    """

    def __init__(self, subscriptions: dict[str, list[str]] | None = None):
        self._subscriptions = {
            user: list(symbols) for user, symbols in (subscriptions or {}).items()
        }

    async def list_symbols(self, user_id: str) -> list[str]:
        return list(self._subscriptions.get(user_id, []))

    async def insert(self, user_id: str, symbol: str) -> None:
        symbols = self._subscriptions.setdefault(user_id, [])
        if symbol in symbols:
            raise PersistenceError("insert", symbol, ValueError("duplicate"))
        symbols.append(symbol)

    async def delete(self, user_id: str, symbol: str) -> None:
        symbols = self._subscriptions.get(user_id, [])
        if symbol in symbols:
            symbols.remove(symbol)
