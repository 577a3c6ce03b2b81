"""Finnhub market-data gateway.

This package splits provider access into focused modules:
- errors: MarketDataError and its status-coded subclasses
- client: API key resolution, symbol normalization, outbound GET
- quotes: Real-time quote
- candles: OHLCV candle series and close-only sparkline history
- etf: ETF profile plus top holdings

All public functions are re-exported here so consumers can use:
    from investmate.services.finnhub import <name>
"""

from investmate.services.finnhub.candles import (
    get_candles,
    get_history,
    resolve_candle_window,
    resolve_history_window,
)
from investmate.services.finnhub.client import (
    fetch_json,
    normalize_symbol,
    require_symbol,
    resolve_api_key,
)
from investmate.services.finnhub.errors import (
    ConfigurationMissingError,
    InvalidInputError,
    MarketDataError,
    NotFoundError,
    UpstreamError,
)
from investmate.services.finnhub.etf import get_etf_overview
from investmate.services.finnhub.quotes import get_quote, parse_quote

__all__ = [
    # errors
    "MarketDataError",
    "InvalidInputError",
    "ConfigurationMissingError",
    "UpstreamError",
    "NotFoundError",
    # client
    "normalize_symbol",
    "require_symbol",
    "resolve_api_key",
    "fetch_json",
    # quotes
    "get_quote",
    "parse_quote",
    # candles
    "get_candles",
    "get_history",
    "resolve_candle_window",
    "resolve_history_window",
    # etf
    "get_etf_overview",
]
