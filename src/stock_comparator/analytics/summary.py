"""Summary table helpers for comparison results."""

from __future__ import annotations

import pandas as pd

from ..domain import ComparisonResult, PerformancePoint
from .performance import INITIAL_INVESTMENT

SUMMARY_COLUMNS = ["ticker", "final_value", "total_return_pct", "start_date", "end_date"]


def _first_and_last_date(points: tuple[PerformancePoint, ...]) -> tuple[pd.Timestamp | None, pd.Timestamp | None]:
    if not points:
        return None, None
    first = pd.to_datetime(points[0].time, unit="s")
    last = pd.to_datetime(points[-1].time, unit="s")
    return first, last


def build_summary(result: ComparisonResult | None) -> pd.DataFrame:
    """Final value and total return of each ticker in a comparison."""
    if result is None:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    rows = []
    for ticker, points, final_value in (
        (result.ticker1, result.series1, result.final_value1),
        (result.ticker2, result.series2, result.final_value2),
    ):
        start, end = _first_and_last_date(points)
        rows.append(
            {
                "ticker": ticker,
                "final_value": final_value,
                "total_return_pct": (final_value / INITIAL_INVESTMENT - 1) * 100,
                "start_date": start,
                "end_date": end,
            }
        )

    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
