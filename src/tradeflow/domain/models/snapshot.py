"""Portfolio snapshot value object"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PortfolioSnapshot:
    """Portfolio totals derived from the current positions"""

    total_value: float
    total_pnl: float
    total_return_percent: float
    cost_basis: float
    position_count: int

    @classmethod
    def empty(cls) -> "PortfolioSnapshot":
        return cls(
            total_value=0.0,
            total_pnl=0.0,
            total_return_percent=0.0,
            cost_basis=0.0,
            position_count=0,
        )

    @property
    def is_gaining(self) -> bool:
        return self.total_pnl >= 0
