"""Live state engine: price simulation, alerts and portfolio totals"""

from .alerts import AlertGenerator
from .portfolio import filter_positions, summarize
from .simulator import PriceSimulator, advance_positions, apply_step

__all__ = [
    "AlertGenerator",
    "PriceSimulator",
    "advance_positions",
    "apply_step",
    "filter_positions",
    "summarize",
]
