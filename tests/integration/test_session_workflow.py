"""End-to-end session workflow against the SQLite store"""

import random

import pytest

from tradeflow.application.events import EventBus
from tradeflow.application.services import DashboardSession, TickScheduler
from tradeflow.core.config import EngineConfig
from tradeflow.domain.models import EventType
from tradeflow.engine import summarize
from tradeflow.infrastructure.identity import StaticIdentityProvider


@pytest.mark.asyncio
async def test_dashboard_session_lifecycle(user, sql_store):
    await sql_store.insert(user.user_id, "GOOG")
    bus = EventBus()
    ticks = []
    bus.subscribe(EventType.TICK, ticks.append)

    session = await DashboardSession.open(
        user,
        sql_store,
        config=EngineConfig(tick_interval_seconds=0.01),
        rng=random.Random(2024),
        identity=StaticIdentityProvider(user),
        event_bus=bus,
    )
    await bus.start()

    await session.follow("NVDA")
    await session.add_shares("NVDA", 5)
    scheduler = TickScheduler(session.tick, interval=0.01, max_ticks=5)
    await scheduler.start()
    await scheduler.wait()
    await session.unfollow("GOOG")

    await session.sign_out()
    await bus.stop()

    assert await sql_store.list_symbols(user.user_id) == ["NVDA"]
    assert session.followed == ["NVDA"]
    assert session.tick_count == 5
    assert len(ticks) == 5
    assert session.snapshot() == summarize(session.positions)
    position = session.positions["NVDA"]
    assert position.low <= position.price <= position.high
    assert position.previous_close == 467.30
    assert session.signed_out


@pytest.mark.asyncio
async def test_follow_survives_store_rejection(user, sql_store):
    await sql_store.insert(user.user_id, "META")
    session = DashboardSession(user, sql_store)

    result = await session.follow("META")

    assert not result.synced
    assert session.followed == ["META"]
    assert session.notifications[0].title == "Sync Failed"
