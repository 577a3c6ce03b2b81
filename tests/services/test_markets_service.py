"""Tests for markets dashboard logic with an in-memory Finnhub."""

from datetime import date

import httpx
import pytest

from investmate.constants import SECTOR_PROXIES
from investmate.services.finnhub import ConfigurationMissingError, UpstreamError
from investmate.services.markets_service import (
    build_alert,
    get_alerts,
    get_earnings,
    get_sector_heatmap,
    get_sentiment,
    parse_tickers_param,
)


def _quotes_by_symbol(moves: dict[str, object], failing: set[str] = frozenset()):
    """Quote handler returning ``dp`` per symbol; symbols in ``failing`` get a 500."""
    def handler(request: httpx.Request) -> httpx.Response:
        symbol = request.url.params["symbol"]
        if symbol in failing:
            return httpx.Response(500, text="upstream down")
        return httpx.Response(200, json={"c": 100.0, "dp": moves.get(symbol)})
    return handler


class TestParseTickersParam:
    def test_splits_and_normalizes(self):
        assert parse_tickers_param(" nvda, tsla ,,msft ", ["X"]) == ["NVDA", "TSLA", "MSFT"]

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_blank_uses_fallback(self, raw):
        assert parse_tickers_param(raw, ["AAPL", "V"]) == ["AAPL", "V"]

    def test_fallback_is_copied(self):
        fallback = ["AAPL"]
        result = parse_tickers_param(None, fallback)
        result.append("MSFT")
        assert fallback == ["AAPL"]


class TestBuildAlert:
    def test_up_move(self):
        alert = build_alert("NVDA", 6.24)
        assert alert.title == "NVDA +6.2% intraday"
        assert alert.body == "Consider trimming / rebalancing exposure."

    def test_down_move(self):
        alert = build_alert("TSLA", -5.0)
        assert alert.title == "TSLA -5.0% vs prior close"
        assert alert.body == "Review stop / drawdown risk."

    def test_exact_threshold_fires(self):
        assert build_alert("MSFT", 5.0) is not None

    @pytest.mark.parametrize("move", [0, 4.99, -4.99])
    def test_small_moves_ignored(self, move):
        assert build_alert("AAPL", move) is None


@pytest.mark.asyncio(loop_scope="function")
class TestHeatmap:
    async def test_one_failing_proxy_defaults_to_zero(self, finnhub):
        moves = {sym: 1.5 for _, sym in SECTOR_PROXIES}
        finnhub.add_handler("quote", _quotes_by_symbol(moves, failing={"XLE"}))

        result = await get_sector_heatmap()

        by_symbol = {s.symbol: s for s in result.sectors}
        assert [s.symbol for s in result.sectors] == [sym for _, sym in SECTOR_PROXIES]
        assert by_symbol["XLE"].move_pct == 0
        assert by_symbol["XLK"].move_pct == 1.5
        assert by_symbol["XLK"].sector == "Technology"

    async def test_non_numeric_move_is_zero(self, finnhub):
        finnhub.add_handler("quote", _quotes_by_symbol({"XLK": "n/a"}))

        result = await get_sector_heatmap()

        assert all(s.move_pct == 0 for s in result.sectors)

    async def test_missing_key_fails_whole_call(self, finnhub, monkeypatch):
        monkeypatch.delenv("FINNHUB_API_KEY", raising=False)

        with pytest.raises(ConfigurationMissingError):
            await get_sector_heatmap()
        assert finnhub.requests == []


@pytest.mark.asyncio(loop_scope="function")
class TestSentiment:
    async def test_combines_move_and_score(self, finnhub):
        finnhub.add_handler("quote", _quotes_by_symbol({"NVDA": 3.2, "TSLA": -1.0}))
        finnhub.add("news-sentiment", 200, {"companyNewsScore": 0.71})

        result = await get_sentiment(["NVDA", "TSLA"])

        assert [i.model_dump(by_alias=True) for i in result.items] == [
            {"symbol": "NVDA", "movePct": 3.2, "sentimentScore": 0.71},
            {"symbol": "TSLA", "movePct": -1.0, "sentimentScore": 0.71},
        ]

    async def test_sentiment_failure_gives_null_score(self, finnhub):
        finnhub.add_handler("quote", _quotes_by_symbol({"NVDA": 2.0}))
        finnhub.add("news-sentiment", 403, {"error": "premium"})

        result = await get_sentiment(["NVDA"])

        assert result.items[0].move_pct == 2.0
        assert result.items[0].sentiment_score is None

    async def test_defaults_when_no_tickers(self, finnhub):
        finnhub.add_handler("quote", _quotes_by_symbol({}))
        finnhub.add("news-sentiment", 200, {})

        result = await get_sentiment()

        assert [i.symbol for i in result.items] == ["NVDA", "TSLA", "MSFT", "NFLX"]


@pytest.mark.asyncio(loop_scope="function")
class TestAlerts:
    async def test_only_large_moves_alert(self, finnhub):
        finnhub.add_handler(
            "quote", _quotes_by_symbol({"NVDA": 7.5, "TSLA": -6.1, "MSFT": 1.0}, failing={"AAPL"}),
        )

        result = await get_alerts()

        assert [a.title for a in result.alerts] == [
            "NVDA +7.5% intraday",
            "TSLA -6.1% vs prior close",
        ]


@pytest.mark.asyncio(loop_scope="function")
class TestEarnings:
    CALENDAR = {
        "earningsCalendar": [
            {"symbol": "AAPL", "date": "2026-10-30", "hour": "amc", "epsActual": None, "epsEstimate": 1.6},
            {"symbol": "GOOG", "date": "2026-10-28", "hour": "amc", "epsEstimate": 2.1},
            {"symbol": "shop", "date": "2026-11-02", "hour": "bmo", "epsActual": 0.4, "epsEstimate": 0.35},
            {"date": "2026-11-03"},
        ]
    }

    async def test_filters_to_requested_tickers(self, finnhub):
        finnhub.add("calendar/earnings", 200, self.CALENDAR)

        result = await get_earnings(["AAPL", "SHOP"], today=date(2026, 10, 19))

        assert [e.model_dump(by_alias=True) for e in result.earnings] == [
            {"symbol": "AAPL", "date": "2026-10-30", "hour": "amc", "epsActual": None, "epsEstimate": 1.6},
            {"symbol": "shop", "date": "2026-11-02", "hour": "bmo", "epsActual": 0.4, "epsEstimate": 0.35},
        ]
        params = finnhub.requests[0].url.params
        assert params["from"] == "2026-10-19"
        assert params["to"] == "2026-11-18"

    async def test_missing_calendar_is_empty(self, finnhub):
        finnhub.add("calendar/earnings", 200, {})

        result = await get_earnings(["AAPL"])

        assert result.earnings == []

    async def test_upstream_failure_502(self, finnhub):
        finnhub.add("calendar/earnings", 500, "down")

        with pytest.raises(UpstreamError, match="earnings calendar"):
            await get_earnings(["AAPL"])
