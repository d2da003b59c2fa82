"""yfinance-backed prices provider."""

from __future__ import annotations

from datetime import date, timedelta

import yfinance as yf

from ..analytics.timeframes import fetch_window
from ..domain import StockData, StockQuery
from ..utils import DataRetrievalError, SymbolNotFoundError, get_logger
from .normalization import normalize_history_frame
from .providers import PricesProvider

logger = get_logger(__name__)


class YFinancePricesProvider(PricesProvider):
    """Adapter around yfinance.download that emits canonical price series."""

    def fetch_stock(self, query: StockQuery) -> StockData:
        symbol = query.symbol.upper()
        start, end = fetch_window(query.end or date.today(), query.timeframe)
        logger.info(
            "Fetching data for %s from %s to %s (Timeframe: %s)",
            symbol,
            start.isoformat(),
            end.isoformat(),
            query.timeframe,
        )

        try:
            raw = yf.download(
                tickers=symbol,
                start=start,
                # yfinance treats the end date as exclusive.
                end=end + timedelta(days=1),
                interval="1d",
                auto_adjust=False,
                group_by="ticker",
                progress=False,
                threads=False,
            )
        except Exception as err:
            raise DataRetrievalError(f"yfinance download failed for {symbol}: {err}") from err

        if isinstance(raw, tuple):
            raw = raw[0]

        prices = normalize_history_frame(raw, symbol)
        if not prices:
            logger.warning("No historical data found for symbol: %s", symbol)
            raise SymbolNotFoundError(symbol)

        return StockData(symbol=symbol, name=self.lookup_name(symbol), prices=prices)

    def lookup_name(self, symbol: str) -> str:
        """Company name for ``symbol``, falling back to ``"<SYMBOL> Inc."``."""
        try:
            info = yf.Ticker(symbol).info or {}
        except Exception as err:
            logger.warning("Name lookup failed for %s: %s", symbol, err)
            info = {}
        return info.get("longName") or info.get("shortName") or f"{symbol} Inc."
