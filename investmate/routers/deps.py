"""Shared router dependencies and helpers."""

import logging
from typing import Awaitable, TypeVar

from investmate.services.finnhub import MarketDataError

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


async def call_gateway(call: Awaitable[_T], fallback_message: str) -> _T:
    """Await a gateway call, turning unexpected exceptions into a 500.

    Typed MarketDataErrors pass through untouched; the app-level handler
    renders them as ``{"error": message}`` with their own status code.
    """
    try:
        return await call
    except MarketDataError:
        raise
    except Exception as exc:
        logger.exception("Unexpected market data failure")
        raise MarketDataError(fallback_message, 500) from exc
