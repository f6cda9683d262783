"""Price simulator - bounded random walk over the followed positions"""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import replace

from loguru import logger

from tradeflow.core.config import EngineConfig
from tradeflow.domain.catalog import InstrumentCatalog
from tradeflow.domain.models import Position
from tradeflow.shared.exceptions import (
    AlreadyFollowingError,
    InvalidQuantityError,
    UnknownSymbolError,
)


def apply_step(
    position: Position,
    change_percent: float,
    volume_increment: int,
    price_floor: float = 1.0,
) -> Position:
    """Apply one walk step to a position

    Args:
        position: Position before the step
        change_percent: Multiplicative move in percent (e.g. -1.0)
        volume_increment: Shares traded during the step
        price_floor: Lowest allowed price

    Returns:
        New position with price, extrema and volume updated
    """
    new_price = max(price_floor, position.price * (1 + change_percent / 100))
    return replace(
        position,
        price=new_price,
        high=max(position.high, new_price),
        low=min(position.low, new_price),
        volume=position.volume + volume_increment,
    )


def advance_positions(
    positions: Mapping[str, Position],
    rng: random.Random,
    config: EngineConfig,
) -> dict[str, Position]:
    """Advance every position by one tick

    Pure with respect to ``positions``: a new mapping is returned in the same
    order and the input is left untouched. All randomness comes from ``rng``.
    """
    advanced: dict[str, Position] = {}
    for symbol, position in positions.items():
        change_percent = rng.uniform(-config.walk_percent, config.walk_percent)
        volume_increment = rng.randrange(*config.volume_step_range)
        advanced[symbol] = apply_step(
            position, change_percent, volume_increment, config.price_floor
        )
    return advanced


class PriceSimulator:
    """Owns the followed positions and advances them tick by tick"""

    def __init__(
        self,
        catalog: InstrumentCatalog,
        rng: random.Random | None = None,
        config: EngineConfig | None = None,
    ):
        """Initialise simulator

        Args:
            catalog: Instruments that may be followed
            rng: Random source; seed it for reproducible runs
            config: Engine parameters
        """
        self.catalog = catalog
        self.rng = rng if rng is not None else random.Random()
        self.config = config or EngineConfig()
        self._positions: dict[str, Position] = {}

    @property
    def positions(self) -> dict[str, Position]:
        """Copy of the current positions in follow order"""
        return dict(self._positions)

    @property
    def symbols(self) -> list[str]:
        return list(self._positions)

    def get(self, symbol: str) -> Position | None:
        return self._positions.get(symbol)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._positions

    def __len__(self) -> int:
        return len(self._positions)

    def follow(self, symbol: str) -> Position:
        """Start following a symbol

        Raises:
            AlreadyFollowingError: If the symbol is already followed
            UnknownSymbolError: If the symbol is not in the catalog
        """
        if symbol in self._positions:
            raise AlreadyFollowingError(symbol)

        instrument = self.catalog.lookup(symbol)
        if instrument is None:
            raise UnknownSymbolError(symbol)

        # New follows start with a demo holding so totals are non-zero
        position = Position.opened(
            symbol=symbol,
            reference_price=instrument.reference_price,
            volume=self.rng.randrange(*self.config.volume_seed_range),
            shares=self.rng.randrange(*self.config.shares_seed_range),
        )
        self._positions[symbol] = position
        logger.debug(
            f"{symbol}: opened at ${position.price:.2f} "
            f"with {position.shares} shares"
        )
        return position

    def unfollow(self, symbol: str) -> Position | None:
        """Stop following a symbol

        Returns:
            The removed position, or None if the symbol was not followed
        """
        position = self._positions.pop(symbol, None)
        if position is not None:
            logger.debug(f"{symbol}: position removed")
        return position

    def add_shares(self, symbol: str, delta: int = 1) -> Position:
        """Increase the held quantity of a followed symbol

        Raises:
            UnknownSymbolError: If the symbol is not followed
            InvalidQuantityError: If delta is negative
        """
        position = self._positions.get(symbol)
        if position is None:
            raise UnknownSymbolError(symbol, "not followed")
        if delta < 0:
            raise InvalidQuantityError(symbol, delta)

        updated = replace(position, shares=position.shares + delta)
        self._positions[symbol] = updated
        return updated

    def tick(self) -> dict[str, Position]:
        """Advance all positions by one step and return the new state"""
        self._positions = advance_positions(
            self._positions, self.rng, self.config
        )
        return dict(self._positions)
