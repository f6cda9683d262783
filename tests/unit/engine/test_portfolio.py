"""Tests for portfolio totals and search"""

import pytest

from tests.factories import PositionFactory
from tradeflow.engine import filter_positions, summarize


def test_summarize_empty_portfolio():
    snapshot = summarize({})

    assert snapshot.total_value == 0
    assert snapshot.total_pnl == 0
    assert snapshot.total_return_percent == 0
    assert snapshot.position_count == 0


def test_summarize_applies_formulas():
    positions = [
        PositionFactory.position("GOOG", price=150.0, previous_close=100.0, shares=2),
        PositionFactory.position("TSLA", price=90.0, previous_close=100.0, shares=3),
    ]

    snapshot = summarize(positions)

    assert snapshot.total_value == pytest.approx(570.0)
    assert snapshot.total_pnl == pytest.approx(70.0)
    assert snapshot.cost_basis == pytest.approx(500.0)
    assert snapshot.total_return_percent == pytest.approx(14.0)
    assert snapshot.position_count == 2


def test_zero_shares_gives_zero_return():
    positions = {
        "GOOG": PositionFactory.position(price=150.0, previous_close=100.0, shares=0)
    }

    snapshot = summarize(positions)

    assert snapshot.total_value == 0
    assert snapshot.total_return_percent == 0


def test_total_value_matches_recomputation_after_ticks(simulator):
    for symbol in ["GOOG", "META", "NVDA"]:
        simulator.follow(symbol)

    for _ in range(200):
        positions = simulator.tick()
        snapshot = summarize(positions)
        expected = sum(p.price * p.shares for p in positions.values())
        assert snapshot.total_value == pytest.approx(expected)


class TestFilterPositions:
    @pytest.fixture
    def positions(self):
        return {
            symbol: PositionFactory.position(symbol)
            for symbol in ["NVDA", "GOOG", "TSLA", "META"]
        }

    def test_empty_query_returns_all_in_order(self, positions, catalog):
        result = filter_positions(positions, "", catalog)

        assert [p.symbol for p in result] == ["NVDA", "GOOG", "TSLA", "META"]

    def test_matches_symbol_case_insensitively(self, positions, catalog):
        assert [p.symbol for p in filter_positions(positions, "nvd", catalog)] == [
            "NVDA"
        ]

    def test_matches_name(self, positions, catalog):
        result = filter_positions(positions, "ALPHABET", catalog)

        assert [p.symbol for p in result] == ["GOOG"]

    def test_matches_sector(self, positions, catalog):
        result = filter_positions(positions, "tech", catalog)

        assert [p.symbol for p in result] == ["GOOG", "META"]

    def test_no_match_returns_empty(self, positions, catalog):
        assert filter_positions(positions, "bank", catalog) == []
