"""Pytest fixtures for TradeFlow tests"""

import random

import pytest

from tests.factories import ScriptedRandom
from tradeflow.core.config import EngineConfig
from tradeflow.domain.catalog import InstrumentCatalog
from tradeflow.domain.repositories import UserIdentity
from tradeflow.engine import AlertGenerator, PriceSimulator
from tradeflow.infrastructure.memory import InMemorySubscriptionStore


@pytest.fixture
def catalog() -> InstrumentCatalog:
    """Default five-instrument catalog"""
    return InstrumentCatalog()


@pytest.fixture
def engine_config() -> EngineConfig:
    return EngineConfig()


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so runs are reproducible"""
    return random.Random(1234)


@pytest.fixture
def simulator(catalog, rng, engine_config) -> PriceSimulator:
    return PriceSimulator(catalog, rng, engine_config)


@pytest.fixture
def flat_simulator(catalog, engine_config) -> PriceSimulator:
    """Simulator whose walk never moves the price"""
    return PriceSimulator(catalog, ScriptedRandom(uniform=[]), engine_config)


@pytest.fixture
def alerts(rng, engine_config) -> AlertGenerator:
    return AlertGenerator(rng, engine_config)


@pytest.fixture
def user() -> UserIdentity:
    return UserIdentity(user_id="user-1", email="trader@example.com")


@pytest.fixture
def store() -> InMemorySubscriptionStore:
    return InMemorySubscriptionStore()
