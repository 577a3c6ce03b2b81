import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from investmate.config import settings as app_settings
from investmate.routers import markets, stocks
from investmate.services.finnhub import MarketDataError

logging.basicConfig(
    level=app_settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


app = FastAPI(
    title="InvestMate Markets",
    summary="Market data backend for the InvestMate personal-finance dashboard.",
    description=(
        "Thin, stateless gateway over the Finnhub REST API. Every request is a direct "
        "pass-through call: there is no cache, retry, or rate limiting.\n\n"
        "**Key concepts:**\n"
        "- Symbols are trimmed and uppercased before use; a blank symbol is a 400.\n"
        "- Provider payloads are validated and reshaped into stable camelCase schemas.\n"
        "- Failures map onto a small taxonomy: 400 invalid input, 404 unknown symbol or "
        "empty series, 500 missing API key, 502 provider failure.\n"
        "- ETF overviews join two provider calls; if either fails the whole request fails.\n"
        "- Errors are returned as `{\"error\": message}`.\n"
    ),
    version="1.0.0",
    openapi_tags=[
        {
            "name": "stocks",
            "description": "Single-symbol market data: quote, candle series, sparkline history, and ETF overview.",
        },
        {
            "name": "markets",
            "description": "Dashboard cards: sector heat map, watchlist sentiment, large-move alerts, and the earnings calendar.",
        },
        {
            "name": "system",
            "description": "Health checks and operational endpoints.",
        },
    ],
)


@app.exception_handler(MarketDataError)
async def market_data_error_handler(request: Request, exc: MarketDataError):
    if exc.status_code >= 500:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


app.include_router(stocks.router)
app.include_router(markets.router)


@app.get("/api/health", summary="Health check", tags=["system"])
async def health():
    """Return `{\"ok\": true}` when the service is running."""
    return {"ok": True}
