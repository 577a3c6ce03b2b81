from fastapi import APIRouter, Query

from investmate.constants import DEFAULT_EARNINGS_TICKERS, DEFAULT_SENTIMENT_TICKERS
from investmate.routers.deps import call_gateway
from investmate.schemas.markets import AlertsResponse, EarningsResponse, HeatmapResponse, SentimentResponse
from investmate.services import markets_service

router = APIRouter(prefix="/api/markets", tags=["markets"])


@router.get("/heatmap", response_model=HeatmapResponse, summary="Sector heat map from sector ETF moves")
async def heatmap():
    return await call_gateway(markets_service.get_sector_heatmap(), "Failed to fetch heat map data")


@router.get("/sentiment", response_model=SentimentResponse, summary="Daily move and news sentiment per ticker")
async def sentiment(tickers: str | None = Query(None, description="Comma-separated tickers")):
    symbols = markets_service.parse_tickers_param(tickers, DEFAULT_SENTIMENT_TICKERS)
    return await call_gateway(markets_service.get_sentiment(symbols), "Failed to fetch sentiment data")


@router.get("/alerts", response_model=AlertsResponse, summary="Large-move alerts for the default watchlist")
async def alerts():
    return await call_gateway(markets_service.get_alerts(), "Failed to fetch alerts")


@router.get("/earnings", response_model=EarningsResponse, summary="Earnings calendar for the next 30 days")
async def earnings(tickers: str | None = Query(None, description="Comma-separated tickers")):
    symbols = markets_service.parse_tickers_param(tickers, DEFAULT_EARNINGS_TICKERS)
    return await call_gateway(markets_service.get_earnings(symbols), "Failed to fetch earnings calendar")
