from __future__ import annotations

from typing import Iterable, List, Optional

from native_price.core.structures.errors import NoPriceAvailableError
from native_price.integrations.dexscreener.dexscreener_constants import (
    MIN_LIQUIDITY_USD,
    STABLE_QUOTE_SYMBOLS,
)
from native_price.integrations.dexscreener.dexscreener_structures import DexscreenerPair
from native_price.logging.logger import get_logger

log = get_logger(__name__)


def _has_price(pair: DexscreenerPair) -> bool:
    return pair.price_usd is not None


def _is_liquid(pair: DexscreenerPair) -> bool:
    return pair.liquidity_usd is not None and pair.liquidity_usd > MIN_LIQUIDITY_USD


def _is_stable_quoted(pair: DexscreenerPair, target_address: str) -> bool:
    return pair.base_token.address == target_address and pair.quote_token.symbol in STABLE_QUOTE_SYMBOLS


def _select_preferred_pair(pairs: List[DexscreenerPair], target_address: str) -> Optional[DexscreenerPair]:
    """
    Deepest stablecoin-quoted pair for the target token above the liquidity floor.
    Equal liquidity keeps input order (sorted() is stable, reverse included).
    """
    candidates = [
        pair for pair in pairs
        if _is_stable_quoted(pair, target_address) and _has_price(pair) and _is_liquid(pair)
    ]
    if not candidates:
        return None
    candidates = sorted(candidates, key=lambda pair: pair.liquidity_usd, reverse=True)
    return candidates[0]


def _select_liquid_pair(pairs: List[DexscreenerPair]) -> Optional[DexscreenerPair]:
    """First pair, in input order, with a price and liquidity above the floor."""
    return next((pair for pair in pairs if _has_price(pair) and _is_liquid(pair)), None)


def _select_any_priced_pair(pairs: List[DexscreenerPair]) -> Optional[DexscreenerPair]:
    """First pair, in input order, that carries a price at all."""
    return next((pair for pair in pairs if _has_price(pair)), None)


def select_price(pairs: Iterable[DexscreenerPair], target_address: str) -> float:
    """
    Pick one USD price for `target_address` out of a list of trading pairs.

    Tiers are tried in order and the first hit wins:
      1. stablecoin-quoted (USDC/USDT) pairs of the target above the liquidity
         floor, deepest first;
      2. the first pair above the liquidity floor, any quote currency;
      3. the first pair with a price, liquidity ignored.

    Raises:
        NoPriceAvailableError: no pair carries a usable USD price.
    """
    pairs_list: List[DexscreenerPair] = list(pairs or [])

    preferred = _select_preferred_pair(pairs_list, target_address)
    if preferred is not None:
        log.debug(
            "[DEX][SELECT] Stable pair %s/%s liquidity=%.2f price=%s.",
            preferred.base_token.symbol,
            preferred.quote_token.symbol,
            preferred.liquidity_usd,
            preferred.price_usd,
        )
        return preferred.price_usd

    liquid = _select_liquid_pair(pairs_list)
    if liquid is not None:
        log.debug(
            "[DEX][SELECT] No stable pair; falling back to liquid pair %s/%s price=%s.",
            liquid.base_token.symbol,
            liquid.quote_token.symbol,
            liquid.price_usd,
        )
        return liquid.price_usd

    any_priced = _select_any_priced_pair(pairs_list)
    if any_priced is not None:
        log.info(
            "[DEX][SELECT] No pair above liquidity floor %.0f; using first priced pair %s/%s price=%s.",
            MIN_LIQUIDITY_USD,
            any_priced.base_token.symbol,
            any_priced.quote_token.symbol,
            any_priced.price_usd,
        )
        return any_priced.price_usd

    raise NoPriceAvailableError(f"No priced pair among {len(pairs_list)} candidates for '{target_address}'.")
