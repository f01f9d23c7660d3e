from __future__ import annotations

import dataclasses
from typing import Dict, Optional, Tuple, Union

from native_price.configuration.config import settings
from native_price.core.structures.errors import UnknownChainError
from native_price.core.structures.structures import (
    ChainConfig,
    ChainConfigOverride,
    ChainId,
    ChainType,
    FetchOptions,
)
from native_price.logging.logger import get_logger

log = get_logger(__name__)

SUPPORTED_CHAINS: Tuple[ChainId, ...] = (
    ChainId.ETHEREUM,
    ChainId.BSC,
    ChainId.BASE,
    ChainId.SOLANA,
)

# Uniswap V3 QuoterV2 on Ethereum/Base, PancakeSwap V3 QuoterV2 on BSC.
DEFAULT_CHAINS: Dict[ChainId, ChainConfig] = {
    ChainId.ETHEREUM: ChainConfig(
        id=ChainId.ETHEREUM,
        name="Ethereum",
        type=ChainType.EVM,
        symbol="ETH",
        rpc_url=settings.ETHEREUM_RPC_URL,
        quoter_address="0x61fFE014bA17989E743c5F6cB21bF9697530B21e",
        wrapped_native_address="0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        stable_address="0xdAC17F958D2ee523a2206206994597C13D831ec7",
        stable_decimals=6,
        pool_fee=3000,
    ),
    ChainId.BSC: ChainConfig(
        id=ChainId.BSC,
        name="BNB Smart Chain",
        type=ChainType.EVM,
        symbol="BNB",
        rpc_url=settings.BSC_RPC_URL,
        quoter_address="0xB048Bbc1Ee6b733FFfCFb9e9CeF7375518e25997",
        wrapped_native_address="0xbb4CdB9CBd36B01bD1cBaEBF2De08d9173bc095c",
        stable_address="0x55d398326f99059fF775485246999027B3197955",
        stable_decimals=18,
        pool_fee=2500,
    ),
    ChainId.BASE: ChainConfig(
        id=ChainId.BASE,
        name="Base",
        type=ChainType.EVM,
        symbol="ETH",
        rpc_url=settings.BASE_RPC_URL,
        quoter_address="0x3d4e44Eb1374240CE5F1B871ab261CD16335B76a",
        wrapped_native_address="0x4200000000000000000000000000000000000006",
        stable_address="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        stable_decimals=6,
        pool_fee=500,
    ),
    ChainId.SOLANA: ChainConfig(
        id=ChainId.SOLANA,
        name="Solana",
        type=ChainType.SOLANA,
        symbol="SOL",
        rpc_url=settings.SOLANA_RPC_URL,
    ),
}


def to_chain_id(chain: Union[ChainId, str]) -> ChainId:
    """Coerce a chain identifier or its string value into a ChainId."""
    if isinstance(chain, ChainId):
        return chain
    try:
        return ChainId(str(chain).strip().lower())
    except ValueError:
        raise UnknownChainError(chain) from None


def _apply_override(config: ChainConfig, override: ChainConfigOverride) -> ChainConfig:
    """Shallow merge: every field set on the override replaces the default one."""
    changes = {
        item.name: getattr(override, item.name)
        for item in dataclasses.fields(override)
        if getattr(override, item.name) is not None
    }
    if not changes:
        return config
    return dataclasses.replace(config, **changes)


def resolve_chain_config(chain: Union[ChainId, str], options: Optional[FetchOptions] = None) -> ChainConfig:
    """
    Build the effective configuration for a chain.

    Starts from the default entry, applies `options.rpc_urls[chain]` then
    `options.chain_configs[chain]`. The defaults are never modified.

    Raises:
        UnknownChainError: the chain is not one of SUPPORTED_CHAINS.
    """
    chain_id = to_chain_id(chain)
    config = DEFAULT_CHAINS.get(chain_id)
    if config is None:
        raise UnknownChainError(chain)
    if options is None:
        return config

    rpc_url = options.rpc_urls.get(chain_id)
    if rpc_url:
        config = dataclasses.replace(config, rpc_url=rpc_url)

    override = options.chain_configs.get(chain_id)
    if override is not None:
        config = _apply_override(config, override)
        log.debug("[CHAIN][CONFIG] Applied override for '%s': %s", chain_id.value, override)

    return config
