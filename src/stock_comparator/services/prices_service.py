"""Service helpers that UI layers call."""

from __future__ import annotations

from datetime import date

from ..analytics.timeframes import API_DEFAULT_TIMEFRAME
from ..data.providers import PricesProvider
from ..domain import StockData, StockQuery
from ..utils import DataRetrievalError


def get_stock(
    provider: PricesProvider,
    symbol: str,
    timeframe: str | None = API_DEFAULT_TIMEFRAME,
    end: date | None = None,
) -> StockData:
    """Fetch daily prices and the company name for one symbol.

    Raises:
        ValueError: if ``symbol`` is blank.
        SymbolNotFoundError: if the provider has no data for ``symbol``.
        DataRetrievalError: for any other provider failure.
    """
    if not symbol or not symbol.strip():
        raise ValueError("Stock symbol is required")

    query = StockQuery(symbol=symbol.strip().upper(), timeframe=timeframe or API_DEFAULT_TIMEFRAME, end=end)
    try:
        return provider.fetch_stock(query)
    except Exception as err:
        if isinstance(err, DataRetrievalError):
            raise
        raise DataRetrievalError(f"Failed to fetch prices for {query.symbol}: {err}") from err
