"""Event bus for session events"""

import asyncio
import inspect
from collections.abc import Callable
from datetime import datetime
from typing import Any

from loguru import logger

from tradeflow.domain.models.event import Event, EventType


class EventBus:
    """Central event bus for a dashboard session

    Events are queued by the publisher and delivered to subscribers by a
    background task, so a slow or failing subscriber never stalls a tick.
    """

    def __init__(self) -> None:
        self._subscribers: dict[EventType, list[Callable]] = {}
        self._event_queue: asyncio.Queue = asyncio.Queue()
        self._running = False
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._running

    def subscribe(self, event_type: EventType, handler: Callable) -> None:
        """Subscribe handler to event type

        Args:
            event_type: Type of event to subscribe to
            handler: Sync or async callable invoked with the event
        """
        self._subscribers.setdefault(event_type, []).append(handler)
        logger.debug(f"Subscribed handler to event: {event_type.value}")

    def unsubscribe(self, event_type: EventType, handler: Callable) -> None:
        if event_type in self._subscribers:
            self._subscribers[event_type].remove(handler)
            logger.debug(f"Unsubscribed handler from event: {event_type.value}")

    def publish(self, event: Event) -> None:
        """Queue event for delivery

        Args:
            event: Event to publish
        """
        self._event_queue.put_nowait(event)
        logger.debug(f"Published event: {event}")

    async def start(self) -> None:
        """Start event processing loop"""
        if self._running:
            logger.warning("Event bus already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._process_events())
        logger.info("Event bus started")

    async def stop(self) -> None:
        """Deliver queued events, then stop processing"""
        if not self._running:
            logger.warning("Event bus not running")
            return

        if self._task:
            await self._event_queue.put(None)
            await self._task
            self._task = None

        self._running = False
        logger.info("Event bus stopped")

    async def _process_events(self) -> None:
        """Background task that processes events from the queue"""
        logger.debug("Event processing loop started")

        while True:
            event = await self._event_queue.get()
            if event is None:
                break
            await self._process_event(event)

        logger.debug("Event processing loop stopped")

    async def _process_event(self, event: Event) -> None:
        """Deliver one event to its subscribers

        Handler failures are logged and do not reach the publisher.
        """
        for handler in list(self._subscribers.get(event.type, [])):
            try:
                if inspect.iscoroutinefunction(handler):
                    await handler(event)
                else:
                    handler(event)
            except Exception as e:
                logger.exception(f"Handler failed for {event.type.value}: {e}")


def create_event(
    type: EventType,
    data: dict[str, Any] | None = None,
    timestamp: datetime | None = None,
) -> Event:
    """Factory function to create an Event"""
    return Event(type=type, data=data, timestamp=timestamp)
