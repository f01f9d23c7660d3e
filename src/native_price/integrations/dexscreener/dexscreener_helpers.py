from __future__ import annotations

from typing import Dict, List, Union

import httpx

from native_price.integrations.dexscreener.dexscreener_constants import (
    HTTP_TIMEOUT_SECONDS,
    JSON,
    REQUEST_HEADERS,
)
from native_price.integrations.dexscreener.dexscreener_structures import DexscreenerPair
from native_price.logging.logger import get_logger

log = get_logger(__name__)


async def _http_get_json(client: httpx.AsyncClient, url: str) -> Union[Dict[str, JSON], List[JSON], None]:
    """
    Perform an HTTP GET request and parse the response as JSON.

    Returns:
        The decoded JSON document (object or array) or None if parsing fails.

    Raises:
        httpx.HTTPStatusError: on a non-2xx status.
    """
    response = await client.get(url, headers=REQUEST_HEADERS, timeout=HTTP_TIMEOUT_SECONDS)
    response.raise_for_status()
    try:
        return response.json()
    except ValueError:
        log.debug("[DEX][HTTP] JSON parse failed for URL '%s'.", url)
        return None


def _parse_pairs(payload: List[JSON]) -> List[DexscreenerPair]:
    """Parse pair documents in payload order, skipping non-object items."""
    pairs: List[DexscreenerPair] = []
    for item in payload:
        if isinstance(item, dict):
            pairs.append(DexscreenerPair.from_json(item))
    return pairs
