"""Portfolio aggregator - totals and search over the current positions"""

from collections.abc import Iterable, Mapping

from tradeflow.domain.catalog import InstrumentCatalog
from tradeflow.domain.models import PortfolioSnapshot, Position


def _values(positions: Mapping[str, Position] | Iterable[Position]) -> list[Position]:
    if isinstance(positions, Mapping):
        return list(positions.values())
    return list(positions)


def summarize(
    positions: Mapping[str, Position] | Iterable[Position],
) -> PortfolioSnapshot:
    """Compute portfolio totals from scratch

    Args:
        positions: Current positions (mapping or sequence)

    Returns:
        Snapshot with total value, P&L and return percent. The return is 0
        when the cost basis is 0.
    """
    items = _values(positions)
    total_value = sum(p.market_value for p in items)
    total_pnl = sum(p.pnl for p in items)
    cost_basis = sum(p.cost_basis for p in items)
    total_return = total_pnl / cost_basis * 100 if cost_basis > 0 else 0.0

    return PortfolioSnapshot(
        total_value=total_value,
        total_pnl=total_pnl,
        total_return_percent=total_return,
        cost_basis=cost_basis,
        position_count=len(items),
    )


def filter_positions(
    positions: Mapping[str, Position] | Iterable[Position],
    query: str,
    catalog: InstrumentCatalog,
) -> list[Position]:
    """Positions whose symbol, name or sector contains ``query``

    Matching is case-insensitive. An empty query returns every position in
    its original order.
    """
    items = _values(positions)
    if not query:
        return items

    needle = query.lower()
    matches = []
    for position in items:
        haystack = [position.symbol]
        instrument = catalog.lookup(position.symbol)
        if instrument is not None:
            haystack.extend([instrument.name, instrument.sector])
        if any(needle in field.lower() for field in haystack):
            matches.append(position)
    return matches
