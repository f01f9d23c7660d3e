from __future__ import annotations

import asyncio
from typing import Dict, List, Optional, Union

from native_price.core.chains import SUPPORTED_CHAINS, resolve_chain_config
from native_price.core.onchain.evm_quoter import fetch_evm_price
from native_price.core.structures.errors import UnknownChainTypeError
from native_price.core.structures.structures import ChainId, ChainType, FetchOptions, PriceResult
from native_price.core.utils.date_utils import timezone_now
from native_price.integrations.dexscreener.dexscreener_client import fetch_solana_price
from native_price.logging.logger import get_logger

log = get_logger(__name__)


async def get_price(chain: Union[ChainId, str], options: Optional[FetchOptions] = None) -> PriceResult:
    """
    Fetch the native asset price of one chain.

    EVM chains are quoted on-chain, Solana through Dexscreener pairs. Every
    failure propagates to the caller unchanged.
    """
    config = resolve_chain_config(chain, options)

    if config.type == ChainType.EVM:
        price = await fetch_evm_price(config)
    elif config.type == ChainType.SOLANA:
        price = await fetch_solana_price()
    else:
        raise UnknownChainTypeError(f"Unknown chain type: {config.type}")

    return PriceResult(chain=config.id, symbol=config.symbol, price=price, timestamp=timezone_now())


async def get_all_prices(options: Optional[FetchOptions] = None) -> Dict[ChainId, PriceResult]:
    """
    Fetch every supported chain concurrently, best-effort.

    A chain that fails is left out of the result; nothing is raised.
    """
    chains: List[ChainId] = list(SUPPORTED_CHAINS)
    results = await asyncio.gather(
        *(get_price(chain, options) for chain in chains),
        return_exceptions=True,
    )

    prices: Dict[ChainId, PriceResult] = {}
    for chain, result in zip(chains, results):
        if isinstance(result, PriceResult):
            prices[chain] = result
        else:
            log.warning("[PRICE][ALL] %s unavailable: %s: %s", chain.value, type(result).__name__, result)

    log.info("[PRICE][ALL] Resolved %d/%d chains.", len(prices), len(chains))
    return prices


async def get_eth_price(options: Optional[FetchOptions] = None) -> float:
    """ETH price on Ethereum mainnet."""
    result = await get_price(ChainId.ETHEREUM, options)
    return result.price


async def get_bnb_price(options: Optional[FetchOptions] = None) -> float:
    """BNB price on BNB Smart Chain."""
    result = await get_price(ChainId.BSC, options)
    return result.price


async def get_base_eth_price(options: Optional[FetchOptions] = None) -> float:
    """ETH price on Base."""
    result = await get_price(ChainId.BASE, options)
    return result.price


async def get_sol_price(options: Optional[FetchOptions] = None) -> float:
    """SOL price from Dexscreener."""
    result = await get_price(ChainId.SOLANA, options)
    return result.price
