from __future__ import annotations

from typing import List, Optional

import httpx

from native_price.core.selection.price_selector import select_price
from native_price.core.structures.errors import MarketDataUnavailableError
from native_price.integrations.dexscreener.dexscreener_constants import (
    HTTP_TIMEOUT_SECONDS,
    SOL_MINT,
    SOLANA_TOKENS_ENDPOINT,
)
from native_price.integrations.dexscreener.dexscreener_helpers import _http_get_json, _parse_pairs
from native_price.integrations.dexscreener.dexscreener_structures import DexscreenerPair
from native_price.logging.logger import get_logger

log = get_logger(__name__)


async def _fetch_token_pairs_with_client(client: httpx.AsyncClient, token_address: str) -> List[DexscreenerPair]:
    url = f"{SOLANA_TOKENS_ENDPOINT}/{token_address}"
    try:
        payload = await _http_get_json(client, url)
    except httpx.HTTPStatusError as error:
        status_code = error.response.status_code
        log.warning("[DEX][FETCH][PAIRS] HTTP error %d for URL '%s'.", status_code, url)
        raise MarketDataUnavailableError(f"Dexscreener API error: {status_code}") from error
    except httpx.HTTPError as error:
        log.warning("[DEX][FETCH][PAIRS] Read failed for '%s' (%s).", url, error)
        raise MarketDataUnavailableError(f"Dexscreener request failed: {error}") from error

    if not isinstance(payload, list):
        log.warning("[DEX][FETCH][PAIRS] Unexpected payload shape for '%s': %s.", url, type(payload).__name__)
        raise MarketDataUnavailableError("Dexscreener returned a non-list payload.")

    pairs = _parse_pairs(payload)
    log.debug("[DEX][FETCH][PAIRS] token=%s → %d pairs.", token_address, len(pairs))
    return pairs


async def fetch_token_pairs(token_address: str, client: Optional[httpx.AsyncClient] = None) -> List[DexscreenerPair]:
    """
    Fetch every Solana pair Dexscreener lists for a token, in API order.

    An existing `client` is reused when given; otherwise a short-lived one is opened.

    Raises:
        MarketDataUnavailableError: non-2xx status, transport failure or malformed payload.
    """
    if client is not None:
        return await _fetch_token_pairs_with_client(client, token_address)
    async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SECONDS) as owned_client:
        return await _fetch_token_pairs_with_client(owned_client, token_address)


async def fetch_solana_price(client: Optional[httpx.AsyncClient] = None) -> float:
    """
    Resolve the SOL/USD price from live Dexscreener pairs.

    Raises:
        MarketDataUnavailableError: the pair list could not be fetched.
        NoPriceAvailableError: no pair carried a usable price.
    """
    pairs = await fetch_token_pairs(SOL_MINT, client=client)
    price = select_price(pairs, SOL_MINT)
    log.debug("[DEX][SOL][PRICE] price=%.6f from %d pairs.", price, len(pairs))
    return price
