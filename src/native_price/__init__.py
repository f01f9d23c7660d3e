"""
native-price

Fetch real-time native asset prices: on-chain V3 quoter simulation for
Ethereum, BSC and Base, Dexscreener pairs for Solana.
"""

from native_price.core.chains import DEFAULT_CHAINS, SUPPORTED_CHAINS, resolve_chain_config
from native_price.core.orchestrator import (
    get_all_prices,
    get_base_eth_price,
    get_bnb_price,
    get_eth_price,
    get_price,
    get_sol_price,
)
from native_price.core.structures.errors import (
    InvalidChainConfigError,
    InvalidChainTypeError,
    MarketDataUnavailableError,
    NoPriceAvailableError,
    PriceFetchError,
    RpcFailureError,
    UnknownChainError,
    UnknownChainTypeError,
    UnsupportedChainError,
)
from native_price.core.structures.structures import (
    ChainConfig,
    ChainConfigOverride,
    ChainId,
    ChainType,
    FetchOptions,
    PriceResult,
)

__all__ = [
    "DEFAULT_CHAINS",
    "SUPPORTED_CHAINS",
    "ChainConfig",
    "ChainConfigOverride",
    "ChainId",
    "ChainType",
    "FetchOptions",
    "InvalidChainConfigError",
    "InvalidChainTypeError",
    "MarketDataUnavailableError",
    "NoPriceAvailableError",
    "PriceFetchError",
    "PriceResult",
    "RpcFailureError",
    "UnknownChainError",
    "UnknownChainTypeError",
    "UnsupportedChainError",
    "get_all_prices",
    "get_base_eth_price",
    "get_bnb_price",
    "get_eth_price",
    "get_price",
    "get_sol_price",
    "resolve_chain_config",
]
