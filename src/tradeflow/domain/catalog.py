"""Instrument catalog"""

from collections.abc import Iterable

from tradeflow.domain.models import Instrument

DEFAULT_INSTRUMENTS: tuple[Instrument, ...] = (
    Instrument("GOOG", "Alphabet Inc.", "Technology", 141.80, "#4285F4"),
    Instrument("TSLA", "Tesla Inc.", "Automotive", 248.50, "#CC0000"),
    Instrument("AMZN", "Amazon.com Inc.", "E-Commerce", 186.40, "#FF9900"),
    Instrument("META", "Meta Platforms", "Technology", 505.75, "#1877F2"),
    Instrument("NVDA", "NVIDIA Corp.", "Semiconductors", 467.30, "#76B900"),
)


class InstrumentCatalog:
    """Static registry of tradable instruments, keyed by symbol"""

    def __init__(self, instruments: Iterable[Instrument] = DEFAULT_INSTRUMENTS):
        self._instruments: dict[str, Instrument] = {}
        for instrument in instruments:
            if instrument.symbol in self._instruments:
                raise ValueError(f"Duplicate instrument: {instrument.symbol}")
            self._instruments[instrument.symbol] = instrument

    def lookup(self, symbol: str) -> Instrument | None:
        return self._instruments.get(symbol)

    def available_symbols(self) -> tuple[str, ...]:
        return tuple(self._instruments)

    def unfollowed(self, followed: Iterable[str]) -> list[str]:
        """Catalog symbols not in ``followed``, in catalog order"""
        taken = set(followed)
        return [symbol for symbol in self._instruments if symbol not in taken]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._instruments

    def __len__(self) -> int:
        return len(self._instruments)
