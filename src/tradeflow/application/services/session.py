"""Dashboard session - the live state engine wired to its collaborators"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from loguru import logger

from tradeflow.application.events import EventBus, create_event
from tradeflow.application.notifications import NotificationFeed
from tradeflow.core.config import EngineConfig
from tradeflow.domain.catalog import InstrumentCatalog
from tradeflow.domain.models import (
    EventType,
    Notification,
    PortfolioSnapshot,
    Position,
)
from tradeflow.domain.repositories import (
    IdentityProvider,
    SubscriptionStore,
    UserIdentity,
)
from tradeflow.engine import AlertGenerator, PriceSimulator, filter_positions, summarize
from tradeflow.shared.exceptions import EngineError, PersistenceError


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a follow or unfollow

    Attributes:
        symbol: Symbol acted on
        position: Created (follow) or removed (unfollow) position
        changed: False when the action was a no-op
        synced: False when the subscription store rejected the change
        error: The persistence failure, if any
    """

    symbol: str
    position: Position | None
    changed: bool = True
    synced: bool = True
    error: PersistenceError | None = None


class DashboardSession:
    """Owns the live state of one user's dashboard

    Ticks and user mutations are serialized through a single lock, so a
    tick never sees a half-applied follow, unfollow or share change.
    Subscription store calls run after the in-memory change is committed
    and a failure never rolls that change back.
    """

    def __init__(
        self,
        user: UserIdentity,
        store: SubscriptionStore,
        initial_symbols: Iterable[str] = (),
        catalog: InstrumentCatalog | None = None,
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
        identity: IdentityProvider | None = None,
        event_bus: EventBus | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialise session

        Args:
            user: Authenticated user
            store: Durable followed-symbol store
            initial_symbols: Symbols followed at session start
            catalog: Tradable instruments
            config: Engine parameters
            rng: Random source shared by the simulator and alert throttle
            identity: Identity provider used for sign-out
            event_bus: Optional bus receiving session events
            clock: Timestamp source for notifications
        """
        self.user = user
        self.store = store
        self.identity = identity
        self.event_bus = event_bus
        self.catalog = catalog or InstrumentCatalog()
        self.config = config or EngineConfig()
        self.rng = rng if rng is not None else random.Random()

        self.simulator = PriceSimulator(self.catalog, self.rng, self.config)
        self.alerts = AlertGenerator(self.rng, self.config, clock)
        self.feed = NotificationFeed(self.config.notification_limit)

        self.tick_count = 0
        self.signed_out = False
        self._lock = asyncio.Lock()

        self._load(initial_symbols)
        self._welcome()

    @classmethod
    async def open(
        cls, user: UserIdentity, store: SubscriptionStore, **kwargs: Any
    ) -> DashboardSession:
        """Create a session seeded from the subscription store

        A store failure starts the session with nothing followed.
        """
        try:
            symbols = await store.list_symbols(user.user_id)
        except PersistenceError as e:
            logger.error(f"Could not load subscriptions for {user.user_id}: {e}")
            symbols = []

        logger.info(
            f"Opening session for {user.email or user.user_id} "
            f"with {len(symbols)} followed symbols"
        )
        return cls(user, store, initial_symbols=symbols, **kwargs)

    def _load(self, symbols: Iterable[str]) -> None:
        for symbol in symbols:
            try:
                self.simulator.follow(symbol)
            except EngineError as e:
                logger.warning(f"Skipping stored subscription: {e}")

    # -- state views -------------------------------------------------------

    @property
    def positions(self) -> dict[str, Position]:
        return self.simulator.positions

    @property
    def followed(self) -> list[str]:
        return self.simulator.symbols

    @property
    def notifications(self) -> list[Notification]:
        return self.feed.items()

    @property
    def unread_count(self) -> int:
        return self.feed.unread_count

    def snapshot(self) -> PortfolioSnapshot:
        """Portfolio totals recomputed from the current positions"""
        return summarize(self.simulator.positions)

    def search(self, query: str) -> list[Position]:
        return filter_positions(self.simulator.positions, query, self.catalog)

    def available_to_subscribe(self) -> list[str]:
        return self.catalog.unfollowed(self.simulator.symbols)

    def mark_read(self, notification_id: str) -> bool:
        return self.feed.mark_read(notification_id)

    def mark_all_read(self) -> None:
        self.feed.mark_all_read()

    # -- engine ------------------------------------------------------------

    async def tick(self) -> PortfolioSnapshot:
        """Advance prices one step, emit alerts and return the new totals"""
        async with self._lock:
            previous = self.simulator.positions
            current = self.simulator.tick()
            for alert in self.alerts.evaluate_tick(previous, current):
                self._notify(alert)
            self.tick_count += 1
            snapshot = summarize(current)

        logger.debug(
            f"Tick {self.tick_count}: value ${snapshot.total_value:,.2f} "
            f"P&L {snapshot.total_pnl:+,.2f}"
        )
        self._publish(
            EventType.TICK,
            {"tick": self.tick_count, "positions": current, "snapshot": snapshot},
        )
        return snapshot

    async def follow(self, symbol: str) -> ActionResult:
        """Follow a symbol, then persist it

        Raises:
            AlreadyFollowingError: If the symbol is already followed
            UnknownSymbolError: If the symbol is not in the catalog
        """
        async with self._lock:
            try:
                position = self.simulator.follow(symbol)
            except EngineError as e:
                logger.warning(f"Follow rejected: {e}")
                raise
            self._welcome()
            self._notify(self.alerts.stock_added(symbol))

        logger.info(f"Following {symbol} ({position.shares} shares)")
        self._publish(EventType.STOCK_FOLLOWED, {"symbol": symbol})

        error = await self._persist("insert", symbol)
        return ActionResult(
            symbol=symbol, position=position, synced=error is None, error=error
        )

    async def unfollow(self, symbol: str) -> ActionResult:
        """Stop following a symbol, then persist it. Safe to repeat."""
        async with self._lock:
            position = self.simulator.unfollow(symbol)
            if position is None:
                logger.debug(f"Unfollow of {symbol} ignored: not followed")
                return ActionResult(symbol=symbol, position=None, changed=False)
            self._notify(self.alerts.stock_removed(symbol))

        logger.info(f"Unfollowed {symbol}")
        self._publish(EventType.STOCK_UNFOLLOWED, {"symbol": symbol})

        error = await self._persist("delete", symbol)
        return ActionResult(
            symbol=symbol, position=position, synced=error is None, error=error
        )

    async def add_shares(self, symbol: str, delta: int = 1) -> Position:
        """Increase the held quantity of a followed symbol

        Raises:
            UnknownSymbolError: If the symbol is not followed
            InvalidQuantityError: If delta is negative
        """
        async with self._lock:
            try:
                position = self.simulator.add_shares(symbol, delta)
            except EngineError as e:
                logger.warning(f"Add shares rejected: {e}")
                raise

        self._publish(
            EventType.SHARES_ADDED,
            {"symbol": symbol, "delta": delta, "shares": position.shares},
        )
        return position

    async def sign_out(self) -> None:
        """End the session with the identity provider

        Raises:
            IdentityError: If the provider rejects the sign-out
        """
        if self.identity is not None:
            await self.identity.sign_out()
        self.signed_out = True
        logger.info(f"Signed out {self.user.email or self.user.user_id}")
        self._publish(EventType.SIGNED_OUT, {"user_id": self.user.user_id})

    # -- internals ---------------------------------------------------------

    async def _persist(self, operation: str, symbol: str) -> PersistenceError | None:
        call = self.store.insert if operation == "insert" else self.store.delete
        try:
            await call(self.user.user_id, symbol)
        except PersistenceError as e:
            # In-memory state stays as applied; no retry
            logger.error(f"Subscription {operation} failed for {symbol}: {e}")
            async with self._lock:
                label = "the follow" if operation == "insert" else "the removal"
                self._notify(self.alerts.persistence_failed(symbol, label))
            self._publish(
                EventType.PERSISTENCE_FAILED,
                {"symbol": symbol, "operation": operation, "error": str(e)},
            )
            return e
        return None

    def _welcome(self) -> None:
        notification = self.alerts.welcome(len(self.simulator))
        if notification is not None:
            self._notify(notification)

    def _notify(self, notification: Notification) -> None:
        self.feed.push(notification)
        self._publish(
            EventType.NOTIFICATION_CREATED, {"notification": notification}
        )

    def _publish(self, event_type: EventType, data: dict[str, Any]) -> None:
        if self.event_bus is not None:
            self.event_bus.publish(create_event(event_type, data))
