"""Tests for the session event bus"""

import pytest

from tradeflow.application.events import EventBus, create_event
from tradeflow.domain.models import EventType


@pytest.mark.asyncio
async def test_delivers_to_sync_and_async_handlers():
    bus = EventBus()
    received = []

    async def async_handler(event):
        received.append(("async", event.data["tick"]))

    bus.subscribe(EventType.TICK, lambda event: received.append(("sync", event.data["tick"])))
    bus.subscribe(EventType.TICK, async_handler)

    await bus.start()
    bus.publish(create_event(EventType.TICK, {"tick": 1}))
    await bus.stop()

    assert received == [("sync", 1), ("async", 1)]


@pytest.mark.asyncio
async def test_failing_handler_does_not_block_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.STOCK_FOLLOWED, broken)
    bus.subscribe(EventType.STOCK_FOLLOWED, received.append)

    await bus.start()
    bus.publish(create_event(EventType.STOCK_FOLLOWED, {"symbol": "GOOG"}))
    await bus.stop()

    assert len(received) == 1


@pytest.mark.asyncio
async def test_only_matching_type_delivered():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.SIGNED_OUT, received.append)

    await bus.start()
    bus.publish(create_event(EventType.TICK))
    await bus.stop()

    assert received == []


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.TICK, received.append)
    bus.unsubscribe(EventType.TICK, received.append)

    await bus.start()
    bus.publish(create_event(EventType.TICK))
    await bus.stop()

    assert received == []
    assert not bus.running
