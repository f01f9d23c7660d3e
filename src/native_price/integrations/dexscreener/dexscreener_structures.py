from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from native_price.integrations.dexscreener.dexscreener_constants import JSON


def _to_optional_float(value: JSON) -> Optional[float]:
    """Convert a JSON scalar into an optional float, returning None on failure."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return float(value)
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class DexscreenerToken:
    address: str
    name: str
    symbol: str

    @staticmethod
    def from_json(payload: Dict[str, JSON]) -> "DexscreenerToken":
        address = payload.get("address")
        name = payload.get("name")
        symbol = payload.get("symbol")
        return DexscreenerToken(
            address=str(address) if address is not None else "",
            name=str(name) if name is not None else "",
            symbol=str(symbol) if symbol is not None else "",
        )


@dataclass(frozen=True)
class DexscreenerLiquidityStats:
    base: Optional[float]
    quote: Optional[float]
    usd: Optional[float]

    @staticmethod
    def from_json(payload: Dict[str, JSON]) -> "DexscreenerLiquidityStats":
        return DexscreenerLiquidityStats(
            base=_to_optional_float(payload.get("base")),
            quote=_to_optional_float(payload.get("quote")),
            usd=_to_optional_float(payload.get("usd")),
        )


@dataclass(frozen=True)
class DexscreenerPair:
    """
    Strongly-typed representation of a Dexscreener 'pair' document.

    Only the fields used for price selection are kept. `price_usd` is None when
    the document carries no parsable `priceUsd`, and `liquidity.usd` is None when
    liquidity is not reported.
    """
    base_token: DexscreenerToken
    quote_token: DexscreenerToken
    pair_address: str
    chain_id: str
    dex_id: str
    price_usd: Optional[float]
    liquidity: DexscreenerLiquidityStats
    url: str

    @property
    def liquidity_usd(self) -> Optional[float]:
        return self.liquidity.usd

    @staticmethod
    def from_json(payload: Dict[str, JSON]) -> "DexscreenerPair":
        base = payload.get("baseToken")
        base_token = DexscreenerToken.from_json(base) \
            if isinstance(base, dict) else DexscreenerToken("", "", "")
        quote = payload.get("quoteToken")
        quote_token = DexscreenerToken.from_json(quote) \
            if isinstance(quote, dict) else DexscreenerToken("", "", "")
        pair_address = payload.get("pairAddress")
        chain_raw = payload.get("chainId")
        dex_raw = payload.get("dexId")
        liquidity_raw = payload.get("liquidity")
        liquidity = DexscreenerLiquidityStats.from_json(liquidity_raw) \
            if isinstance(liquidity_raw, dict) else DexscreenerLiquidityStats(None, None, None)
        url = payload.get("url")
        return DexscreenerPair(
            base_token=base_token,
            quote_token=quote_token,
            pair_address=str(pair_address) if pair_address is not None else "",
            chain_id=str(chain_raw).lower() if isinstance(chain_raw, (str, int)) else "",
            dex_id=str(dex_raw).lower() if isinstance(dex_raw, (str, int)) else "",
            price_usd=_to_optional_float(payload.get("priceUsd")),
            liquidity=liquidity,
            url=str(url) if url is not None else "",
        )
