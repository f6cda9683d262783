"""Tests for Config and EngineConfig"""

import pytest

from tradeflow.core.config import Config, EngineConfig
from tradeflow.shared.exceptions import ConfigurationError


@pytest.fixture
def env(monkeypatch, tmp_path):
    monkeypatch.setenv("TRADEFLOW_USER_ID", "user-42")
    monkeypatch.setenv("TRADEFLOW_USER_EMAIL", "trader@example.com")
    monkeypatch.setenv("TRADEFLOW_DB_PATH", str(tmp_path / "tradeflow.db"))
    monkeypatch.delenv("TRADEFLOW_SEED", raising=False)
    monkeypatch.delenv("TRADEFLOW_TICK_INTERVAL", raising=False)
    return monkeypatch


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()

        assert config.tick_interval_seconds == 1.0
        assert config.walk_percent == 1.0
        assert config.price_floor == 1.0
        assert config.alert_threshold_percent == 3.0
        assert config.alert_probability == 0.05
        assert config.notification_limit == 10

    @pytest.mark.parametrize(
        "overrides",
        [
            {"tick_interval_seconds": 0},
            {"tick_interval_seconds": float("nan")},
            {"tick_interval_seconds": float("inf")},
            {"walk_percent": float("nan")},
            {"price_floor": 0},
            {"alert_probability": 1.5},
            {"notification_limit": 0},
            {"shares_seed_range": (0, 5)},
            {"volume_seed_range": (10, 10)},
            {"volume_step_range": (-1, 5)},
        ],
    )
    def test_invalid_values_rejected(self, overrides):
        with pytest.raises(ConfigurationError):
            EngineConfig(**overrides)


class TestConfigFromEnv:
    def test_loads_environment(self, env, tmp_path):
        config = Config.from_env()

        assert config.user_id == "user-42"
        assert config.user_email == "trader@example.com"
        assert config.db_path == str(tmp_path / "tradeflow.db")
        assert config.seed is None
        assert config.engine_config.tick_interval_seconds == 1.0

    def test_seed_and_interval_overrides(self, env):
        env.setenv("TRADEFLOW_SEED", "7")
        env.setenv("TRADEFLOW_TICK_INTERVAL", "0.5")

        config = Config.from_env()

        assert config.seed == 7
        assert config.engine_config.tick_interval_seconds == 0.5

    def test_missing_user_rejected(self, env):
        env.delenv("TRADEFLOW_USER_ID")

        with pytest.raises(ConfigurationError):
            Config.from_env()

    @pytest.mark.parametrize(
        "name,value",
        [
            ("TRADEFLOW_SEED", "abc"),
            ("TRADEFLOW_TICK_INTERVAL", "fast"),
            ("TRADEFLOW_TICK_INTERVAL", "nan"),
            ("TRADEFLOW_TICK_INTERVAL", "inf"),
        ],
    )
    def test_malformed_numbers_rejected(self, env, name, value):
        env.setenv(name, value)

        with pytest.raises(ConfigurationError):
            Config.from_env()
