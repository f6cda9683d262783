"""Configuration management for the TradeFlow engine"""

import math
import os
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from tradeflow.shared.exceptions import ConfigurationError


@dataclass(frozen=True)
class EngineConfig:
    """Tuning parameters for the live state engine"""

    # Seconds between ticks
    tick_interval_seconds: float = 1.0

    # Symmetric bound of the per-tick random walk (percent)
    walk_percent: float = 1.0

    # Prices never fall below this value
    price_floor: float = 1.0

    # Total change (percent) beyond which price alerts may fire
    alert_threshold_percent: float = 3.0

    # Chance per qualifying tick that an alert is emitted
    alert_probability: float = 0.05

    # Maximum retained notifications
    notification_limit: int = 10

    # Half-open ranges [low, high) for randomized seeds
    shares_seed_range: tuple[int, int] = (5, 25)
    volume_seed_range: tuple[int, int] = (1_000_000, 11_000_000)
    volume_step_range: tuple[int, int] = (0, 10_000)

    def __post_init__(self):
        for name in ("tick_interval_seconds", "walk_percent", "price_floor"):
            if not math.isfinite(getattr(self, name)):
                raise ConfigurationError(f"{name} must be a finite number")
        if self.tick_interval_seconds <= 0:
            raise ConfigurationError("tick_interval_seconds must be positive")
        if self.walk_percent < 0:
            raise ConfigurationError("walk_percent must be non-negative")
        if self.price_floor <= 0:
            raise ConfigurationError("price_floor must be positive")
        if not 0.0 <= self.alert_probability <= 1.0:
            raise ConfigurationError("alert_probability must be within [0, 1]")
        if self.notification_limit < 1:
            raise ConfigurationError("notification_limit must be at least 1")
        for name in ("shares_seed_range", "volume_seed_range"):
            low, high = getattr(self, name)
            if low < 1 or high <= low:
                raise ConfigurationError(f"{name} must be a positive range")
        low, high = self.volume_step_range
        if low < 0 or high <= low:
            raise ConfigurationError("volume_step_range must be non-negative")


def get_db_path() -> Path:
    """Get database path that works both locally and in production.

    Priority order:
    1. Production path: /opt/tradeflow/data/tradeflow.db
    2. Local development path: project_root/data/tradeflow.db

    Returns:
        Path object for the database file
    """
    production_path = Path("/opt/tradeflow/data/tradeflow.db")
    if production_path.parent.exists():
        logger.debug(f"Using production database path: {production_path}")
        return production_path

    # src/tradeflow/core/config.py -> project root
    project_root = Path(__file__).parent.parent.parent.parent
    local_path = project_root / "data" / "tradeflow.db"
    local_path.parent.mkdir(parents=True, exist_ok=True)

    logger.debug(f"Using local database path: {local_path}")
    return local_path


def _env_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from e


@dataclass
class Config:
    """Session configuration loaded from environment variables"""

    user_id: str
    user_email: str
    engine_config: EngineConfig = field(default_factory=EngineConfig)
    db_path: str = "/opt/tradeflow/data/tradeflow.db"
    seed: int | None = None

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables

        Returns:
            Config instance with values from environment

        Raises:
            ConfigurationError: If a variable is missing or malformed
        """
        user_id = os.getenv("TRADEFLOW_USER_ID", "").strip()
        if not user_id:
            raise ConfigurationError("TRADEFLOW_USER_ID must be set")

        user_email = os.getenv("TRADEFLOW_USER_EMAIL", "").strip()

        db_path = os.getenv("TRADEFLOW_DB_PATH") or str(get_db_path())

        engine_config = EngineConfig(
            tick_interval_seconds=_env_float("TRADEFLOW_TICK_INTERVAL", 1.0),
        )

        config = cls(
            user_id=user_id,
            user_email=user_email,
            engine_config=engine_config,
            db_path=db_path,
            seed=_env_int("TRADEFLOW_SEED"),
        )

        logger.info("Configuration loaded:")
        logger.info(f"  User: {config.user_id}")
        logger.info(f"  Email: {config.user_email or 'Not provided'}")
        logger.info(f"  Database: {config.db_path}")
        logger.info(
            f"  Seed: {config.seed if config.seed is not None else 'random'}"
        )
        logger.info(
            f"  Tick Interval: {engine_config.tick_interval_seconds} seconds"
        )
        logger.info(f"  Random Walk: ±{engine_config.walk_percent}% per tick")
        logger.info(
            f"  Alert Threshold: {engine_config.alert_threshold_percent}% "
            f"(p={engine_config.alert_probability})"
        )

        return config
