"""Finnhub candle fetching: full OHLCV series and close-only sparkline history."""

import time
from typing import Any

from investmate.constants import (
    CANDLE_WINDOWS,
    DEFAULT_CANDLE_RANGE,
    DEFAULT_HISTORY_WINDOW,
    HISTORY_WINDOWS,
)
from investmate.schemas.stock import CandlePoint, CandleSeriesResponse, HistoryPoint, HistoryResponse
from investmate.services.finnhub.client import (
    fetch_json,
    number_or_zero,
    require_symbol,
    resolve_api_key,
)
from investmate.services.finnhub.errors import NotFoundError


def resolve_candle_window(range_label: str | None) -> tuple[str, int, str]:
    """Return (range, lookback_seconds, resolution) for a range label.

    Unknown or missing labels fall back to the 1w window.
    """
    if range_label and range_label in CANDLE_WINDOWS:
        seconds, resolution = CANDLE_WINDOWS[range_label]
        return range_label, seconds, resolution
    seconds, resolution = CANDLE_WINDOWS[DEFAULT_CANDLE_RANGE]
    return DEFAULT_CANDLE_RANGE, seconds, resolution


def resolve_history_window(range_label: str, now: int | None = None) -> tuple[int, int, str]:
    """Return (from, to, resolution) in epoch seconds for the sparkline table."""
    seconds, resolution = HISTORY_WINDOWS.get(range_label, DEFAULT_HISTORY_WINDOW)
    to = now if now is not None else int(time.time())
    return to - seconds, to, resolution


def _element(values: Any, idx: int) -> float:
    if not isinstance(values, list) or idx >= len(values):
        return 0
    return number_or_zero(values[idx])


def parse_candles(symbol: str, range_label: str, resolution: str, raw: Any) -> CandleSeriesResponse:
    """Zip Finnhub's parallel o/h/l/c/v/t arrays into ordered candle points.

    Missing numeric values become 0; timestamps are converted to milliseconds.
    """
    if not isinstance(raw, dict) or raw.get("s") != "ok":
        raise NotFoundError("No historical data for symbol")
    times = raw.get("t")
    if not isinstance(times, list) or not times:
        raise NotFoundError("No historical data for symbol")

    points = [
        CandlePoint(
            time=int(number_or_zero(ts) * 1000),
            open=_element(raw.get("o"), idx),
            high=_element(raw.get("h"), idx),
            low=_element(raw.get("l"), idx),
            close=_element(raw.get("c"), idx),
            volume=_element(raw.get("v"), idx),
        )
        for idx, ts in enumerate(times)
    ]
    return CandleSeriesResponse(symbol=symbol, range=range_label, resolution=resolution, points=points)


def parse_history(symbol: str, range_label: str, raw: Any) -> HistoryResponse:
    """Pair each close with its timestamp for the sparkline payload."""
    if (
        not isinstance(raw, dict)
        or raw.get("s") != "ok"
        or not isinstance(raw.get("c"), list)
        or not isinstance(raw.get("t"), list)
    ):
        raise NotFoundError("No historical data")

    times = raw["t"]
    points = [
        HistoryPoint(t=int(_element(times, idx) * 1000), c=number_or_zero(close))
        for idx, close in enumerate(raw["c"])
    ]
    return HistoryResponse(symbol=symbol, range=range_label, points=points)


async def _fetch_candles_raw(symbol: str, resolution: str, from_: int, to: int, key: str) -> Any:
    params = {"symbol": symbol, "resolution": resolution, "from": from_, "to": to}
    return await fetch_json("stock/candle", params, key, "Failed to fetch history", label="history")


async def get_candles(
    symbol_raw: str | None,
    range: str | None = None,
    resolution: str | None = None,
    from_: int | None = None,
    to: int | None = None,
    api_key: str | None = None,
) -> CandleSeriesResponse:
    """Fetch an OHLCV candle series.

    ``range`` picks the lookback and default resolution; explicit ``from_``
    and ``to`` (epoch seconds) replace the computed window and an explicit
    ``resolution`` replaces the table's.
    """
    symbol = require_symbol(symbol_raw, example="SPY")

    range_label, lookback, table_resolution = resolve_candle_window(range)
    resolved_resolution = resolution or table_resolution
    end = to if to is not None else int(time.time())
    start = from_ if from_ is not None else end - lookback

    key = resolve_api_key(api_key)
    raw = await _fetch_candles_raw(symbol, resolved_resolution, start, end, key)
    return parse_candles(symbol, range_label, resolved_resolution, raw)


async def get_history(
    symbol_raw: str | None,
    range: str = "1m",
    api_key: str | None = None,
) -> HistoryResponse:
    """Fetch close-only history for sparklines."""
    symbol = require_symbol(symbol_raw, example="SPY")
    start, end, resolution = resolve_history_window(range)

    key = resolve_api_key(api_key)
    raw = await _fetch_candles_raw(symbol, resolution, start, end, key)
    return parse_history(symbol, range, raw)
