from typing import Dict, List, Tuple, Union

from native_price.configuration.config import settings

BASE_URL: str = settings.DEXSCREENER_BASE_URL.rstrip("/")
SOLANA_TOKENS_ENDPOINT: str = f"{BASE_URL}/tokens/v1/solana"
HTTP_TIMEOUT_SECONDS: float = settings.DEXSCREENER_HTTP_TIMEOUT_SECONDS
REQUEST_HEADERS: Dict[str, str] = {"Accept": "application/json"}

# Wrapped SOL mint, the asset identifier Dexscreener lists SOL pairs under
SOL_MINT: str = "So11111111111111111111111111111111111111112"

STABLE_QUOTE_SYMBOLS: Tuple[str, ...] = ("USDC", "USDT")
MIN_LIQUIDITY_USD: float = 100_000.0

JSONScalar = Union[str, int, float, bool, None]
JSON = Union[JSONScalar, Dict[str, "JSON"], List["JSON"]]
