"""Position domain model"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Simulated holding of one followed instrument (domain model)

    Positions are immutable values. The price simulator replaces them on
    every tick or mutation, so a reader always sees a consistent state.
    """

    symbol: str
    price: float
    previous_close: float
    high: float
    low: float
    volume: int
    shares: int

    def __post_init__(self):
        if self.price <= 0:
            raise ValueError(f"{self.symbol}: price must be positive")
        if not self.low <= self.price <= self.high:
            raise ValueError(
                f"{self.symbol}: expected low <= price <= high, got "
                f"{self.low} / {self.price} / {self.high}"
            )
        if self.shares < 0:
            raise ValueError(f"{self.symbol}: shares cannot be negative")

    @classmethod
    def opened(
        cls, symbol: str, reference_price: float, volume: int, shares: int
    ) -> "Position":
        """Create a fresh position anchored at the reference price"""
        return cls(
            symbol=symbol,
            price=reference_price,
            previous_close=reference_price,
            high=reference_price,
            low=reference_price,
            volume=volume,
            shares=shares,
        )

    @property
    def change(self) -> float:
        return self.price - self.previous_close

    @property
    def change_percent(self) -> float:
        return self.change / self.previous_close * 100

    @property
    def market_value(self) -> float:
        return self.price * self.shares

    @property
    def cost_basis(self) -> float:
        return self.previous_close * self.shares

    @property
    def pnl(self) -> float:
        return self.change * self.shares
