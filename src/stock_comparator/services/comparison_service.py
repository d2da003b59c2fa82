"""Fetch two tickers side by side and rebase them for comparison."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from datetime import date

from ..analytics.performance import normalize_performance
from ..analytics.timeframes import resolve_start
from ..data.providers import PricesProvider
from ..domain import ComparisonResult, StockData, Timeframe
from ..utils import DataProcessingError, FetchFailedError, SymbolNotFoundError, get_logger
from .prices_service import get_stock

logger = get_logger(__name__)


def _clean_ticker(raw: str) -> str:
    ticker = (raw or "").strip().upper()
    if not ticker:
        raise ValueError("Both tickers are required")
    return ticker


def fetch_pair(
    provider: PricesProvider, ticker1: str, ticker2: str, timeframe: str, end: date | None = None
) -> tuple[StockData, StockData]:
    """Fetch both tickers concurrently and fail if either lookup fails."""
    tickers = (ticker1, ticker2)
    with ThreadPoolExecutor(max_workers=2, thread_name_prefix="stock-fetch") as pool:
        futures = [pool.submit(get_stock, provider, ticker, timeframe, end) for ticker in tickers]

    results: list[StockData] = []
    failed: list[str] = []
    not_found: list[str] = []
    for ticker, future in zip(tickers, futures):
        err = future.exception()
        if err is None:
            results.append(future.result())
            continue
        logger.warning("Fetch failed for %s: %s", ticker, err)
        failed.append(ticker)
        if isinstance(err, SymbolNotFoundError):
            not_found.append(ticker)

    if failed:
        all_not_found = len(not_found) == len(failed)
        msg = "Stock symbol not found." if all_not_found else "Failed to fetch stock data."
        msg += "".join(f" Check ticker {ticker}." for ticker in failed)
        raise FetchFailedError(msg, tickers=failed, not_found=all_not_found)

    return results[0], results[1]


def compare_tickers(
    provider: PricesProvider,
    ticker1: str,
    ticker2: str,
    timeframe: Timeframe = "1y",
    now: date | None = None,
) -> ComparisonResult:
    """Rebase two tickers to a $100 investment over ``timeframe``.

    Raises:
        ValueError: if either ticker is blank.
        FetchFailedError: if either provider lookup fails.
        DataProcessingError: if either series has no usable data in the window.
    """
    ticker1 = _clean_ticker(ticker1)
    ticker2 = _clean_ticker(ticker2)
    end = now or date.today()
    logger.info("Comparing %s and %s over %s", ticker1, ticker2, timeframe)

    data1, data2 = fetch_pair(provider, ticker1, ticker2, timeframe, end)

    start = resolve_start(end, timeframe)
    processed1 = normalize_performance(data1.prices, start)
    processed2 = normalize_performance(data2.prices, start)

    missing = [ticker for ticker, processed in ((ticker1, processed1), (ticker2, processed2)) if processed is None]
    if missing:
        msg = "Could not process data for comparison."
        msg += "".join(f" Check data availability for {ticker}." for ticker in missing)
        logger.warning(msg)
        raise DataProcessingError(msg, tickers=missing)

    logger.info(
        "Compared %s (%.2f) and %s (%.2f)", ticker1, processed1.final_value, ticker2, processed2.final_value
    )
    return ComparisonResult(
        ticker1=ticker1,
        ticker2=ticker2,
        series1=processed1.points,
        series2=processed2.points,
        final_value1=processed1.final_value,
        final_value2=processed2.final_value,
        timeframe=timeframe,
        start_date=start,
    )
