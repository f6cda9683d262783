"""Test data factories and deterministic random sources"""

import random
from collections.abc import Iterable
from datetime import datetime

from tradeflow.domain.models import Notification, NotificationCategory, Position


class ScriptedRandom(random.Random):
    """Random source that replays scripted draws

    ``uniform`` and ``random`` pop from their scripts and fall back to
    ``uniform_default`` / ``random_default`` once exhausted. ``randrange``
    always returns the lower bound.
    """

    def __init__(
        self,
        uniform: Iterable[float] = (),
        random_values: Iterable[float] = (),
        uniform_default: float = 0.0,
        random_default: float = 0.99,
    ):
        self._uniform = list(uniform)
        self._random = list(random_values)
        self._uniform_default = uniform_default
        self._random_default = random_default
        super().__init__(0)

    def uniform(self, a, b):
        return self._uniform.pop(0) if self._uniform else self._uniform_default

    def random(self):
        return self._random.pop(0) if self._random else self._random_default

    def randrange(self, start, stop=None, step=1):
        return start


class PositionFactory:
    """Factory for creating test positions"""

    @staticmethod
    def position(
        symbol: str = "NVDA",
        price: float = 467.30,
        previous_close: float | None = None,
        high: float | None = None,
        low: float | None = None,
        volume: int = 1_000_000,
        shares: int = 10,
    ) -> Position:
        previous_close = price if previous_close is None else previous_close
        return Position(
            symbol=symbol,
            price=price,
            previous_close=previous_close,
            high=max(price, previous_close) if high is None else high,
            low=min(price, previous_close) if low is None else low,
            volume=volume,
            shares=shares,
        )


class NotificationFactory:
    """Factory for creating test notifications"""

    @staticmethod
    def notification(
        id: str = "n-1",
        category: NotificationCategory = NotificationCategory.SYSTEM,
        title: str = "Title",
        message: str = "Message",
        created_at: datetime | None = None,
        read: bool = False,
    ) -> Notification:
        return Notification(
            id=id,
            category=category,
            title=title,
            message=message,
            created_at=created_at or datetime(2025, 11, 3, 10, 15),
            read=read,
        )
