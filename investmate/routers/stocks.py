from fastapi import APIRouter, Query

from investmate.routers.deps import call_gateway
from investmate.schemas.stock import (
    CandleSeriesResponse,
    EtfOverviewResponse,
    HistoryResponse,
    QuoteResponse,
)
from investmate.services.finnhub import get_candles, get_etf_overview, get_history, get_quote

router = APIRouter(prefix="/api/stocks", tags=["stocks"])

_ERRORS = {
    400: {"description": "Missing or blank `symbol`"},
    404: {"description": "Unknown symbol or no data"},
    500: {"description": "API key not configured or unexpected failure"},
    502: {"description": "Market data provider failed"},
}


@router.get("/quote", response_model=QuoteResponse, summary="Get a real-time quote", responses=_ERRORS)
async def quote(symbol: str = Query("", description="Ticker symbol, e.g. SPY")):
    """Fetch the latest quote for one symbol from Finnhub.

    The symbol is trimmed and uppercased. A zero price from the provider is
    reported as 404 rather than as a zero-valued quote.
    """
    return await call_gateway(get_quote(symbol), "Failed to fetch quote")


@router.get("/history", response_model=HistoryResponse, summary="Get close-only history for sparklines", responses=_ERRORS)
async def history(
    symbol: str = Query("", description="Ticker symbol, e.g. SPY"),
    range: str = Query("1m", description="1d, 1w, 1m, 3m or 1y"),
):
    return await call_gateway(get_history(symbol, range), "Failed to fetch history")


@router.get("/candles", response_model=CandleSeriesResponse, summary="Get OHLCV candles", responses=_ERRORS)
async def candles(
    symbol: str = Query("", description="Ticker symbol, e.g. SPY"),
    range: str | None = Query(None, description="1d, 1w, 1m, 3m or 1y (unknown values fall back to 1w)"),
    resolution: str | None = Query(None, description="Override the range's resolution (1, 5, 15, 30, 60, D, W, M)"),
    from_: int | None = Query(None, alias="from", description="Window start, epoch seconds"),
    to: int | None = Query(None, description="Window end, epoch seconds"),
):
    """Fetch an OHLCV candle series.

    `range` selects a lookback and resolution; explicit `from`/`to` replace
    the computed window and `resolution` replaces the range's default.
    """
    return await call_gateway(
        get_candles(symbol, range=range, resolution=resolution, from_=from_, to=to),
        "Failed to fetch history",
    )


@router.get("/etf", response_model=EtfOverviewResponse, summary="Get ETF profile and top holdings", responses=_ERRORS)
async def etf(symbol: str = Query("", description="ETF symbol, e.g. VOO")):
    """Fetch the fund profile and its top 10 holdings. Both upstream calls must succeed."""
    return await call_gateway(get_etf_overview(symbol), "Failed to fetch ETF data")
