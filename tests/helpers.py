"""Shared test helpers: an in-memory Finnhub and canned provider payloads."""

from typing import Any, Callable

import httpx

# Captured before any test swaps httpx.AsyncClient out.
_REAL_ASYNC_CLIENT = httpx.AsyncClient

_API_PREFIX = "/api/v1/"


class FinnhubStub:
    """Serves canned responses per Finnhub path and records every request.

    Handlers may be plain functions or coroutines; MockTransport awaits either.
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, Any] | Callable[[httpx.Request], Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, status: int = 200, body: Any = None) -> "FinnhubStub":
        self.routes[path] = (status, body if body is not None else {})
        return self

    def add_handler(self, path: str, handler: Callable[[httpx.Request], Any]) -> "FinnhubStub":
        self.routes[path] = handler
        return self

    def fail_transport(self, path: str) -> "FinnhubStub":
        def _boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)
        return self.add_handler(path, _boom)

    def requests_for(self, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if _path(r) == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(_path(request))
        if route is None:
            return httpx.Response(404, json={"error": "no stub for path"})
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def install(self, monkeypatch) -> "FinnhubStub":
        transport = httpx.MockTransport(self.handle)
        monkeypatch.setattr(
            httpx, "AsyncClient", lambda **kw: _REAL_ASYNC_CLIENT(transport=transport, **kw),
        )
        return self


def _path(request: httpx.Request) -> str:
    path = request.url.path
    return path[len(_API_PREFIX):] if path.startswith(_API_PREFIX) else path.lstrip("/")


VOO_QUOTE = {"c": 410.2, "d": 1.1, "dp": 0.27, "o": 409, "h": 411, "l": 408.5, "pc": 409.1, "t": 1700000000}


def make_candles(n: int = 5, start_ts: int = 1700000000, step: int = 1800) -> dict:
    """Finnhub-style parallel candle arrays with ``n`` rows."""
    times = [start_ts + i * step for i in range(n)]
    closes = [100.0 + i for i in range(n)]
    return {
        "s": "ok",
        "t": times,
        "o": [c - 0.5 for c in closes],
        "h": [c + 1.0 for c in closes],
        "l": [c - 1.0 for c in closes],
        "c": closes,
        "v": [1_000_000 + i for i in range(n)],
    }


def make_holdings(n: int) -> dict:
    return {
        "symbol": "SPY",
        "holdings": [
            {"symbol": f"sym{i}", "description": f"Company {i}", "weight": round(10 - i * 0.5, 2)}
            for i in range(n)
        ],
    }
