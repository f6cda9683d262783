"""Alert generator - turns price movement and user actions into notifications"""

import itertools
import random
from collections.abc import Callable
from datetime import datetime

from loguru import logger

from tradeflow.core.config import EngineConfig
from tradeflow.domain.models import Notification, NotificationCategory, Position

WELCOME_TITLE = "Welcome to TradeFlow"
WELCOME_MESSAGE = "Your dashboard is ready. Start tracking your stocks!"


class AlertGenerator:
    """Builds notifications for the dashboard feed

    Price alerts are throttled by an independent draw per qualifying tick,
    so a sustained move produces an alert after a geometric number of ticks
    rather than on every tick.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.config = config or EngineConfig()
        self.clock = clock
        self._sequence = itertools.count(1)
        self._welcomed = False

    @property
    def welcomed(self) -> bool:
        return self._welcomed

    def _next_id(self, prefix: str) -> str:
        return f"{prefix}-{next(self._sequence)}"

    def _build(
        self, prefix: str, category: NotificationCategory, title: str, message: str
    ) -> Notification:
        return Notification(
            id=self._next_id(prefix),
            category=category,
            title=title,
            message=message,
            created_at=self.clock(),
        )

    def evaluate(
        self, previous: Position | None, current: Position
    ) -> Notification | None:
        """Check one symbol after a tick

        Args:
            previous: Position before the tick (None if just followed)
            current: Position after the tick

        Returns:
            A price alert, or None when the move is small or the draw fails
        """
        total_change = current.change_percent
        if abs(total_change) <= self.config.alert_threshold_percent:
            return None
        if self.rng.random() >= self.config.alert_probability:
            return None

        direction = "up" if total_change > 0 else "down"
        logger.debug(
            f"{current.symbol}: alert fired at {total_change:+.2f}% "
            f"(previous price {previous.price if previous else 'n/a'})"
        )
        return self._build(
            f"{current.symbol}-alert",
            NotificationCategory.PRICE_ALERT,
            f"{current.symbol} Price Alert",
            f"{current.symbol} is {direction} {abs(total_change):.2f}% today",
        )

    def evaluate_tick(
        self,
        previous: dict[str, Position],
        current: dict[str, Position],
    ) -> list[Notification]:
        """Evaluate every symbol of a tick in follow order"""
        alerts = []
        for symbol, position in current.items():
            alert = self.evaluate(previous.get(symbol), position)
            if alert is not None:
                alerts.append(alert)
        return alerts

    def stock_added(self, symbol: str) -> Notification:
        return self._build(
            f"add-{symbol}",
            NotificationCategory.PORTFOLIO,
            "Stock Added",
            f"{symbol} has been added to your portfolio",
        )

    def stock_removed(self, symbol: str) -> Notification:
        return self._build(
            f"remove-{symbol}",
            NotificationCategory.PORTFOLIO,
            "Stock Removed",
            f"{symbol} has been removed from your portfolio",
        )

    def persistence_failed(self, symbol: str, operation: str) -> Notification:
        return self._build(
            f"sync-{symbol}",
            NotificationCategory.SYSTEM,
            "Sync Failed",
            f"Could not save {operation} of {symbol}. "
            "The change is kept for this session only.",
        )

    def welcome(self, followed_count: int) -> Notification | None:
        """Welcome notification, issued once the followed set is non-empty"""
        if self._welcomed or followed_count == 0:
            return None
        self._welcomed = True
        return self._build(
            "welcome", NotificationCategory.SYSTEM, WELCOME_TITLE, WELCOME_MESSAGE
        )
