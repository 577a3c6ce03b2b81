"""Finnhub ETF profile and top holdings."""

import asyncio
import logging
from typing import Any

import httpx

from investmate.constants import ETF_TOP_HOLDINGS
from investmate.schemas.stock import EtfHolding, EtfOverviewResponse, EtfProfile
from investmate.services.finnhub.client import (
    as_number,
    coerce_number,
    read_json,
    require_symbol,
    resolve_api_key,
    send,
)
from investmate.services.finnhub.errors import UpstreamError

logger = logging.getLogger(__name__)


def _text(val: Any) -> str | None:
    if isinstance(val, str) and val.strip():
        return val
    return None


def parse_holdings(raw: Any) -> list[EtfHolding]:
    """Top holdings in provider order. A missing list means the fund has none."""
    entries = raw.get("holdings") if isinstance(raw, dict) else None
    if not isinstance(entries, list):
        return []

    holdings = []
    for h in entries[:ETF_TOP_HOLDINGS]:
        h = h if isinstance(h, dict) else {}
        holdings.append(EtfHolding(
            symbol=str(h.get("symbol") or "").upper(),
            description=str(h.get("description") or ""),
            weight=coerce_number(h.get("weight")),
        ))
    return holdings


def parse_profile(symbol: str, raw: Any) -> EtfProfile:
    info = raw if isinstance(raw, dict) else {}
    return EtfProfile(
        name=_text(info.get("name")) or _text(info.get("description")) or symbol,
        category=_text(info.get("category")),
        expense_ratio=as_number(info.get("expenseRatio")),
        isin=_text(info.get("isin")),
        exchange=_text(info.get("exchange")),
    )


async def get_etf_overview(symbol_raw: str | None, api_key: str | None = None) -> EtfOverviewResponse:
    """Fetch profile and holdings together; both must succeed."""
    symbol = require_symbol(symbol_raw, example="VOO")
    key = resolve_api_key(api_key)

    async with httpx.AsyncClient() as client:
        try:
            async with asyncio.TaskGroup() as tg:
                profile_task = tg.create_task(send(client, "etf/profile2", {"symbol": symbol}, key))
                holdings_task = tg.create_task(send(client, "etf/holdings", {"symbol": symbol}, key))
        except ExceptionGroup as eg:
            # The sibling request is already cancelled; surface the first failure.
            raise eg.exceptions[0]
    profile_resp, holdings_resp = profile_task.result(), holdings_task.result()

    if not profile_resp.is_success or not holdings_resp.is_success:
        logger.error(
            "ETF profile/holdings error for %s: profile=%s holdings=%s",
            symbol, profile_resp.status_code, holdings_resp.status_code,
        )
        raise UpstreamError("Failed to fetch ETF data")

    return EtfOverviewResponse(
        symbol=symbol,
        profile=parse_profile(symbol, read_json(profile_resp)),
        holdings=parse_holdings(read_json(holdings_resp)),
    )
