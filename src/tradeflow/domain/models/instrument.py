"""Instrument value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Instrument:
    """Tradable instrument listed in the catalog"""

    symbol: str
    name: str
    sector: str
    reference_price: float
    color: str = "#666666"

    def __post_init__(self):
        if not self.symbol:
            raise ValueError("Instrument symbol cannot be empty")
        if self.reference_price <= 0:
            raise ValueError(
                f"Reference price for {self.symbol} must be positive"
            )

    def __str__(self) -> str:
        return self.symbol
