"""Shared test fixtures."""

import sys
from datetime import date, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from stock_comparator.domain import RawPricePoint, StockData, StockQuery
from stock_comparator.utils import DataRetrievalError, SymbolNotFoundError


def make_point(day: date, price: float) -> RawPricePoint:
    return RawPricePoint(date=day, price=price, open=price, high=price, low=price, close=price)


def make_series(start: date, prices: list[float]) -> tuple[RawPricePoint, ...]:
    return tuple(make_point(start + timedelta(days=i), price) for i, price in enumerate(prices))


class FakeProvider:
    """In-memory provider keyed by symbol.

    Values may be a price series or an exception instance to raise.
    """

    def __init__(self, data: dict):
        self.data = data
        self.queries: list[StockQuery] = []

    def fetch_stock(self, query: StockQuery) -> StockData:
        self.queries.append(query)
        entry = self.data.get(query.symbol)
        if entry is None:
            raise SymbolNotFoundError(query.symbol)
        if isinstance(entry, Exception):
            raise entry
        return StockData(symbol=query.symbol, name=f"{query.symbol} Corp", prices=entry)


@pytest.fixture
def today() -> date:
    return date(2024, 6, 15)


@pytest.fixture
def window_series(today):
    """AAPL 100 -> 150 and MSFT 100 -> 120 starting on the 1y window start."""
    start = date(2023, 6, 15)
    return {
        "AAPL": make_series(start, [100.0, 110.0, 125.0, 150.0]),
        "MSFT": make_series(start, [100.0, 95.0, 105.0, 120.0]),
    }


@pytest.fixture
def provider(window_series) -> FakeProvider:
    return FakeProvider(dict(window_series))


@pytest.fixture
def failing_provider() -> FakeProvider:
    return FakeProvider({"BOOM": DataRetrievalError("network down")})
