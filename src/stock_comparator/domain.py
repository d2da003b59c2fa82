"""Domain models shared by the services, API and UI."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Literal, get_args

Timeframe = Literal["1y", "3y", "5y", "all"]

TIMEFRAMES: tuple[str, ...] = get_args(Timeframe)


@dataclass(frozen=True, slots=True)
class RawPricePoint:
    date: date
    price: float
    open: float
    high: float
    low: float
    close: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.isoformat(),
            "price": self.price,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
        }


PriceSeries = tuple[RawPricePoint, ...]


@dataclass(frozen=True, slots=True)
class StockQuery:
    symbol: str
    timeframe: str = "2y"
    end: date | None = None


@dataclass(frozen=True, slots=True)
class StockData:
    symbol: str
    name: str | None
    prices: PriceSeries

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "prices": [point.to_dict() for point in self.prices],
        }


@dataclass(frozen=True, slots=True)
class PerformancePoint:
    time: int
    value: float


@dataclass(frozen=True, slots=True)
class PerformanceSeries:
    points: tuple[PerformancePoint, ...]
    final_value: float


@dataclass(frozen=True, slots=True)
class ComparisonResult:
    ticker1: str
    ticker2: str
    series1: tuple[PerformancePoint, ...]
    series2: tuple[PerformancePoint, ...]
    final_value1: float
    final_value2: float
    timeframe: Timeframe = "1y"
    start_date: date | None = None
