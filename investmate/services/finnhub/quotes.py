"""Finnhub real-time quote fetching."""

from typing import Any

from investmate.schemas.stock import QuoteResponse
from investmate.services.finnhub.client import (
    as_number,
    fetch_json,
    number_or_zero,
    require_symbol,
    resolve_api_key,
)
from investmate.services.finnhub.errors import NotFoundError


def parse_quote(symbol: str, raw: Any) -> QuoteResponse:
    """Map Finnhub's short quote keys (c/d/dp/o/h/l/pc/t) onto a QuoteResponse.

    A missing or zero current price is how Finnhub reports an unknown symbol.
    """
    if not isinstance(raw, dict):
        raise NotFoundError("Symbol not found or no data")

    current = as_number(raw.get("c"))
    if not current:
        raise NotFoundError("Symbol not found or no data")

    ts = as_number(raw.get("t"))
    return QuoteResponse(
        symbol=symbol,
        current=current,
        change=number_or_zero(raw.get("d")),
        change_pct=number_or_zero(raw.get("dp")),
        open=number_or_zero(raw.get("o")),
        high=number_or_zero(raw.get("h")),
        low=number_or_zero(raw.get("l")),
        prev_close=number_or_zero(raw.get("pc")),
        timestamp=int(ts * 1000) if ts else None,
    )


async def get_quote(symbol_raw: str | None, api_key: str | None = None) -> QuoteResponse:
    """Fetch the latest quote for one symbol."""
    symbol = require_symbol(symbol_raw, example="SPY")
    key = resolve_api_key(api_key)

    raw = await fetch_json("quote", {"symbol": symbol}, key, "Failed to fetch quote", label="quote")
    return parse_quote(symbol, raw)
