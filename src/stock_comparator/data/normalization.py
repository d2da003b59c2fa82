"""Normalize yfinance outputs into a canonical price series."""

from __future__ import annotations

from typing import Any

import pandas as pd

from ..domain import PriceSeries, RawPricePoint

RAW_FIELD_NAMES = {"Close", "Adj Close", "Volume", "Open", "High", "Low"}
CANONICAL_COLUMNS = ["date", "price", "open", "high", "low", "close"]


def normalize_history_frame(raw: pd.DataFrame | None, symbol: str) -> PriceSeries:
    """Convert a raw yfinance frame for one symbol to a sorted price series.

    Rows with any missing value are dropped, duplicate dates keep the last row,
    and prices are rounded to cents.
    """
    if raw is None or raw.empty:
        return ()

    frame = _select_symbol(raw, symbol)
    working = _canonical_frame(frame)
    if working.empty:
        return ()

    working = (
        working.dropna(subset=CANONICAL_COLUMNS)
        .drop_duplicates(subset="date", keep="last")
        .sort_values("date")
    )

    return tuple(
        RawPricePoint(
            date=row.date,
            price=round(float(row.price), 2),
            open=round(float(row.open), 2),
            high=round(float(row.high), 2),
            low=round(float(row.low), 2),
            close=round(float(row.close), 2),
        )
        for row in working.itertuples(index=False)
    )


def _select_symbol(df: pd.DataFrame, symbol: str) -> pd.DataFrame:
    if not isinstance(df.columns, pd.MultiIndex):
        return df

    df = _ensure_tickers_first(df)
    tickers = df.columns.get_level_values(0).unique()
    if symbol in tickers:
        return df[symbol]
    return df[tickers[0]]


def _ensure_tickers_first(df: pd.DataFrame) -> pd.DataFrame:
    level0 = df.columns.get_level_values(0)
    level1 = df.columns.get_level_values(1)

    fields_in_level0 = _has_raw_field(level0)
    fields_in_level1 = _has_raw_field(level1)

    if fields_in_level0 and not fields_in_level1:
        return df.swaplevel(0, 1, axis=1)
    return df


def _has_raw_field(level: Any) -> bool:
    try:
        return bool(set(level) & RAW_FIELD_NAMES)
    except TypeError:
        return False


def _canonical_frame(frame: pd.DataFrame) -> pd.DataFrame:
    rename_map = {
        "Close": "close",
        "Adj Close": "adj_close",
        "AdjClose": "adj_close",
        "Adj_Close": "adj_close",
        "Open": "open",
        "High": "high",
        "Low": "low",
        "Close*": "close",
    }

    working = frame.copy()
    working.columns = [rename_map.get(col, col).lower() if isinstance(col, str) else col for col in working.columns]

    if "close" not in working.columns:
        return pd.DataFrame(columns=CANONICAL_COLUMNS)
    for missing in ("open", "high", "low"):
        if missing not in working.columns:
            working[missing] = pd.NA

    # Adjusted close is the canonical price; fall back to close where absent.
    if "adj_close" in working.columns:
        working["price"] = working["adj_close"].fillna(working["close"])
    else:
        working["price"] = working["close"]

    working = working.reset_index()
    working = working.rename(columns={working.columns[0]: "date"})
    dates = pd.to_datetime(working["date"])
    if dates.dt.tz is not None:
        # Keep the exchange-local calendar day.
        dates = dates.dt.tz_localize(None)
    working["date"] = dates.dt.date

    return working[CANONICAL_COLUMNS]
