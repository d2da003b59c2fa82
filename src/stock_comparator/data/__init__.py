"""Data access layer."""

from .normalization import normalize_history_frame
from .providers import PricesProvider
from .yfinance_provider import YFinancePricesProvider

__all__ = ["PricesProvider", "YFinancePricesProvider", "normalize_history_frame"]
