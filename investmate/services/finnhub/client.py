"""Finnhub plumbing shared by every gateway operation.

Key resolution, symbol normalization, and the outbound GET. Nothing here
keeps state between calls.
"""

import logging
import math
import os
from typing import Any

import httpx

from investmate.config import settings
from investmate.services.finnhub.errors import (
    ConfigurationMissingError,
    InvalidInputError,
    UpstreamError,
)

logger = logging.getLogger(__name__)


def normalize_symbol(raw: str | None) -> str:
    """Trim and uppercase a raw ticker; None or blank becomes ``""``."""
    if raw is None:
        return ""
    return str(raw).strip().upper()


def require_symbol(raw: str | None, example: str = "SPY") -> str:
    """Normalize ``raw`` or raise InvalidInputError if nothing is left."""
    symbol = normalize_symbol(raw)
    if not symbol:
        raise InvalidInputError(f"symbol query param required, e.g. ?symbol={example}")
    return symbol


def resolve_api_key(override: str | None = None, env_names: list[str] | None = None) -> str:
    """Return the provider API key.

    An explicit non-blank override wins. Otherwise each name in ``env_names``
    (default: ``settings.finnhub_api_key_env_vars``) is read from the process
    environment in order and the first non-blank value is returned.
    """
    if override is not None and override.strip():
        return override.strip()

    names = env_names if env_names is not None else settings.finnhub_api_key_env_vars
    for name in names:
        value = (os.environ.get(name) or "").strip()
        if value:
            return value

    raise ConfigurationMissingError("Market data API key not configured")


def endpoint_url(path: str) -> str:
    return f"{settings.finnhub_base_url.rstrip('/')}/{path.lstrip('/')}"


async def send(
    client: httpx.AsyncClient,
    path: str,
    params: dict[str, Any],
    api_key: str,
) -> httpx.Response:
    """GET a Finnhub endpoint. Transport failures become UpstreamError.

    The status code is left for the caller to check.
    """
    try:
        return await client.get(endpoint_url(path), params={**params, "token": api_key})
    except httpx.HTTPError as exc:
        logger.error("Finnhub %s request failed: %s", path, exc)
        raise UpstreamError("Market data provider unreachable") from exc


def read_json(resp: httpx.Response) -> Any:
    """Decode a response body, treating garbage as an upstream failure."""
    try:
        return resp.json()
    except ValueError as exc:
        logger.error("Finnhub returned non-JSON body (%s): %s", resp.status_code, resp.text[:200])
        raise UpstreamError("Market data provider returned an invalid response") from exc


async def fetch_json(
    path: str,
    params: dict[str, Any],
    api_key: str,
    error_message: str,
    label: str | None = None,
) -> Any:
    """Single GET returning parsed JSON; non-2xx raises UpstreamError(error_message).

    ``label`` names the call in the error log and defaults to ``path``.
    """
    async with httpx.AsyncClient() as client:
        resp = await send(client, path, params, api_key)
    if not resp.is_success:
        logger.error("Finnhub %s error %s: %s", label or path, resp.status_code, resp.text[:500])
        raise UpstreamError(error_message)
    return read_json(resp)


def as_number(val: Any) -> float | None:
    """Return ``val`` as a finite number, or None for anything else.

    Booleans are rejected even though they subclass int.
    """
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        return None
    if math.isnan(val) or math.isinf(val):
        return None
    return val


def number_or_zero(val: Any) -> float:
    num = as_number(val)
    return num if num is not None else 0


def coerce_number(val: Any) -> float:
    """Like number_or_zero, but numeric strings such as ``"7.1"`` are parsed."""
    if isinstance(val, str):
        try:
            val = float(val)
        except ValueError:
            return 0
    return number_or_zero(val)
