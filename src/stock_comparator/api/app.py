"""
FastAPI entry point for the stock lookup API.

Run locally:
    uvicorn stock_comparator.api.app:app --reload --port 8000
"""

from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..data import PricesProvider, YFinancePricesProvider
from ..services import get_stock
from ..utils import SymbolNotFoundError, get_logger

logger = get_logger(__name__)

app = FastAPI(title="Stock Comparator API")


class PricePointModel(BaseModel):
    date: str
    price: float
    open: float
    high: float
    low: float
    close: float


class StockResponse(BaseModel):
    symbol: str
    name: str | None = None
    prices: list[PricePointModel]


class ErrorResponse(BaseModel):
    error: str


def get_provider() -> PricesProvider:
    """FastAPI dependency: the upstream price provider."""
    return YFinancePricesProvider()


@app.get(
    "/api/stock",
    response_model=StockResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def stock(
    symbol: str | None = None,
    timeframe: str = "2y",
    provider: PricesProvider = Depends(get_provider),
):
    """Daily prices and company name for ``symbol`` over ``timeframe``."""
    if not symbol or not symbol.strip():
        return JSONResponse(status_code=400, content={"error": "Stock symbol is required"})

    symbol = symbol.strip().upper()
    try:
        data = get_stock(provider, symbol, timeframe)
    except SymbolNotFoundError as err:
        logger.warning("Lookup for %s returned no data: %s", symbol, err)
        return JSONResponse(
            status_code=404, content={"error": f"Stock symbol {symbol} not found or no data available"}
        )
    except Exception:
        logger.exception("Error fetching data for %s", symbol)
        return JSONResponse(status_code=500, content={"error": "Failed to fetch stock data"})

    return data.to_dict()


@app.get("/health")
def health():
    return {"status": "ok"}
