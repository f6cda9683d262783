"""Fixtures for integration tests against SQLite"""

import pytest

from tradeflow.infrastructure.database.subscriptions import (
    SqlSubscriptionStore,
    SubscriptionDatabase,
)


@pytest.fixture
def subscription_db():
    """In-memory SQLite subscription database"""
    db = SubscriptionDatabase(":memory:")
    yield db
    db.close()


@pytest.fixture
def sql_store(subscription_db) -> SqlSubscriptionStore:
    return SqlSubscriptionStore(subscription_db)
