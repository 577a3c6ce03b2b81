"""Markets dashboard logic: sector heat map, sentiment, move alerts, earnings.

Per-symbol upstream failures are logged and defaulted so one bad ticker
does not blank the whole card. A missing API key still fails the call.
"""

import asyncio
import logging
from datetime import date, timedelta
from typing import Any

from investmate.constants import (
    ALERT_MOVE_THRESHOLD,
    DEFAULT_ALERT_WATCHLIST,
    DEFAULT_EARNINGS_TICKERS,
    DEFAULT_SENTIMENT_TICKERS,
    EARNINGS_LOOKAHEAD_DAYS,
    SECTOR_PROXIES,
)
from investmate.schemas.markets import (
    Alert,
    AlertsResponse,
    EarningsEntry,
    EarningsResponse,
    HeatmapResponse,
    SectorMove,
    SentimentItem,
    SentimentResponse,
)
from investmate.services.finnhub import MarketDataError, fetch_json, resolve_api_key
from investmate.services.finnhub.client import as_number

logger = logging.getLogger(__name__)


def parse_tickers_param(raw: str | None, fallback: list[str]) -> list[str]:
    """Split a comma-separated tickers param; blank input yields ``fallback``."""
    if raw and raw.strip():
        return [s.strip().upper() for s in raw.split(",") if s.strip()]
    return list(fallback)


async def _move_pct(symbol: str, key: str) -> float:
    """Daily percent move for ``symbol``; 0 if the quote can't be fetched."""
    try:
        quote = await fetch_json("quote", {"symbol": symbol}, key, "Failed to fetch quote")
    except MarketDataError as exc:
        logger.warning("Quote fetch failed for %s: %s", symbol, exc.message)
        return 0
    dp = as_number(quote.get("dp")) if isinstance(quote, dict) else None
    return dp if dp is not None else 0


async def _sentiment_score(symbol: str, key: str) -> float | None:
    try:
        data = await fetch_json(
            "news-sentiment", {"symbol": symbol}, key, "Failed to fetch sentiment",
        )
    except MarketDataError as exc:
        logger.warning("Sentiment fetch failed for %s: %s", symbol, exc.message)
        return None
    return as_number(data.get("companyNewsScore")) if isinstance(data, dict) else None


async def get_sector_heatmap(api_key: str | None = None) -> HeatmapResponse:
    key = resolve_api_key(api_key)
    moves = await asyncio.gather(*[_move_pct(sym, key) for _, sym in SECTOR_PROXIES])
    return HeatmapResponse(sectors=[
        SectorMove(sector=sector, symbol=sym, move_pct=move)
        for (sector, sym), move in zip(SECTOR_PROXIES, moves)
    ])


async def get_sentiment(
    tickers: list[str] | None = None, api_key: str | None = None,
) -> SentimentResponse:
    symbols = tickers or DEFAULT_SENTIMENT_TICKERS
    key = resolve_api_key(api_key)

    async def _one(symbol: str) -> SentimentItem:
        move, score = await asyncio.gather(_move_pct(symbol, key), _sentiment_score(symbol, key))
        return SentimentItem(symbol=symbol, move_pct=move, sentiment_score=score)

    items = await asyncio.gather(*[_one(s) for s in symbols])
    return SentimentResponse(items=list(items))


def build_alert(symbol: str, move_pct: float) -> Alert | None:
    """Return an alert for moves at or beyond the threshold, else None."""
    if move_pct >= ALERT_MOVE_THRESHOLD:
        return Alert(
            title=f"{symbol} +{move_pct:.1f}% intraday",
            body="Consider trimming / rebalancing exposure.",
        )
    if move_pct <= -ALERT_MOVE_THRESHOLD:
        return Alert(
            title=f"{symbol} {move_pct:.1f}% vs prior close",
            body="Review stop / drawdown risk.",
        )
    return None


async def get_alerts(
    watchlist: list[str] | None = None, api_key: str | None = None,
) -> AlertsResponse:
    symbols = watchlist or DEFAULT_ALERT_WATCHLIST
    key = resolve_api_key(api_key)
    moves = await asyncio.gather(*[_move_pct(s, key) for s in symbols])

    alerts = []
    for symbol, move in zip(symbols, moves):
        alert = build_alert(symbol, move)
        if alert is not None:
            alerts.append(alert)
    return AlertsResponse(alerts=alerts)


def _parse_earnings(calendar: Any, wanted: set[str]) -> list[EarningsEntry]:
    entries = calendar.get("earningsCalendar") if isinstance(calendar, dict) else None
    if not isinstance(entries, list):
        return []

    results = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        symbol = entry.get("symbol")
        if not isinstance(symbol, str) or symbol.upper() not in wanted:
            continue
        results.append(EarningsEntry(
            symbol=symbol,
            date=str(entry.get("date") or ""),
            hour=str(entry.get("hour") or ""),
            eps_actual=as_number(entry.get("epsActual")),
            eps_estimate=as_number(entry.get("epsEstimate")),
        ))
    return results


async def get_earnings(
    tickers: list[str] | None = None,
    api_key: str | None = None,
    today: date | None = None,
) -> EarningsResponse:
    """Upcoming earnings over the next 30 days for the given tickers."""
    symbols = tickers or DEFAULT_EARNINGS_TICKERS
    wanted = {s.upper() for s in symbols}
    key = resolve_api_key(api_key)

    start = today or date.today()
    end = start + timedelta(days=EARNINGS_LOOKAHEAD_DAYS)
    calendar = await fetch_json(
        "calendar/earnings",
        {"from": start.isoformat(), "to": end.isoformat()},
        key,
        "Failed to fetch earnings calendar",
    )
    return EarningsResponse(earnings=_parse_earnings(calendar, wanted))
