"""Shared constants for candle windows and markets dashboards."""

from typing import Literal

# Range labels accepted by the candle and history endpoints.
RangeType = Literal["1d", "1w", "1m", "3m", "1y"]

DAY_SECONDS = 24 * 60 * 60

# Lookback seconds and Finnhub resolution for each candle range label.
CANDLE_WINDOWS: dict[str, tuple[int, str]] = {
    "1d": (DAY_SECONDS, "5"),
    "1w": (7 * DAY_SECONDS, "30"),
    "1m": (30 * DAY_SECONDS, "60"),
    "3m": (90 * DAY_SECONDS, "D"),
    "1y": (365 * DAY_SECONDS, "D"),
}
DEFAULT_CANDLE_RANGE = "1w"

# Sparkline history uses coarser resolutions than the candle chart.
HISTORY_WINDOWS: dict[str, tuple[int, str]] = {
    "1d": (DAY_SECONDS, "5"),
    "1w": (7 * DAY_SECONDS, "30"),
    "1m": (30 * DAY_SECONDS, "D"),
    "3m": (90 * DAY_SECONDS, "D"),
    "1y": (365 * DAY_SECONDS, "W"),
}
DEFAULT_HISTORY_WINDOW: tuple[int, str] = (30 * DAY_SECONDS, "D")

ETF_TOP_HOLDINGS = 10

# Sector ETFs used as proxies for the heat map.
SECTOR_PROXIES: list[tuple[str, str]] = [
    ("Technology", "XLK"),
    ("Energy", "XLE"),
    ("Financials", "XLF"),
    ("Healthcare", "XLV"),
    ("Consumer Discretionary", "XLY"),
    ("Utilities", "XLU"),
]

DEFAULT_SENTIMENT_TICKERS = ["NVDA", "TSLA", "MSFT", "NFLX"]
DEFAULT_ALERT_WATCHLIST = ["NVDA", "TSLA", "MSFT", "AAPL"]
DEFAULT_EARNINGS_TICKERS = ["AAPL", "MSFT", "SHOP", "V"]

# Absolute daily move (percent) that triggers an alert.
ALERT_MOVE_THRESHOLD = 5.0
EARNINGS_LOOKAHEAD_DAYS = 30
