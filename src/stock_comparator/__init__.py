"""stock_comparator package with UI-agnostic logic for the comparator."""

from .domain import (
    ComparisonResult,
    PerformancePoint,
    PerformanceSeries,
    RawPricePoint,
    StockData,
    StockQuery,
    Timeframe,
)

__all__ = [
    "ComparisonResult",
    "PerformancePoint",
    "PerformanceSeries",
    "RawPricePoint",
    "StockData",
    "StockQuery",
    "Timeframe",
]
