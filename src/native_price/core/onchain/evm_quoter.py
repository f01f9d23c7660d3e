"""
EVM native price through a V3 QuoterV2 contract.

The quoter is simulated with a read-only eth_call: swap exactly one wrapped
native token into the chain's reference stablecoin on a single pool and read
back the output amount.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Set, Tuple, Union

from aiohttp import ClientTimeout
from web3 import AsyncWeb3

from native_price.configuration.config import settings
from native_price.core.onchain.quoter_abis import NO_SQRT_PRICE_LIMIT, QUOTE_AMOUNT_IN, QUOTER_V2_ABI
from native_price.core.structures.errors import InvalidChainTypeError, RpcFailureError, UnsupportedChainError
from native_price.core.structures.structures import ChainConfig, ChainId, ChainType
from native_price.logging.logger import get_logger

log = get_logger(__name__)

# EVM network id per supported chain; a chain missing here cannot get an RPC handle
EVM_NETWORK_IDS: Dict[ChainId, int] = {
    ChainId.ETHEREUM: 1,
    ChainId.BSC: 56,
    ChainId.BASE: 8453,
}

QuoterResult = Union[int, Tuple[int, ...]]


@dataclass(frozen=True)
class EvmConnection:
    chain: ChainId
    network_id: int
    rpc_url: str
    web3: AsyncWeb3


_connections: Dict[ChainId, EvmConnection] = {}
_connections_lock = threading.Lock()
_logged_result_shapes: Set[ChainId] = set()


def _build_connection(config: ChainConfig) -> EvmConnection:
    network_id = EVM_NETWORK_IDS.get(config.id)
    if network_id is None:
        raise UnsupportedChainError(f"Unsupported EVM chain: {config.id.value}")
    provider = AsyncWeb3.AsyncHTTPProvider(
        config.rpc_url,
        request_kwargs={"timeout": ClientTimeout(total=settings.EVM_RPC_TIMEOUT_SECONDS)},
    )
    log.debug("[EVM][CLIENT] New AsyncWeb3 handle chain=%s network_id=%d rpc=%s",
              config.id.value, network_id, config.rpc_url)
    return EvmConnection(chain=config.id, network_id=network_id, rpc_url=config.rpc_url, web3=AsyncWeb3(provider))


def get_evm_connection(config: ChainConfig) -> EvmConnection:
    """
    Return the cached RPC handle for the chain, creating it on first use.

    A cached handle pointing at another RPC URL than `config.rpc_url` is replaced,
    so only the most recent URL per chain is kept. Callers alternating between
    the default URL and an override rebuild the handle on every switch; that
    costs a new provider and its HTTP session, never a wrong answer.

    Raises:
        UnsupportedChainError: the chain has no known EVM network id.
    """
    with _connections_lock:
        connection = _connections.get(config.id)
        if connection is None or connection.rpc_url != config.rpc_url:
            connection = _build_connection(config)
            _connections[config.id] = connection
        return connection


def clear_evm_connections() -> None:
    """Drop every cached RPC handle."""
    with _connections_lock:
        _connections.clear()
        _logged_result_shapes.clear()


def _extract_amount_out(chain: ChainId, result: QuoterResult) -> int:
    """
    Read the output amount from a quoter result.

    QuoterV2 returns (amountOut, sqrtPriceX96After, initializedTicksCrossed,
    gasEstimate) while the V1 quoter returns a bare amountOut; both are accepted.
    """
    with _connections_lock:
        first_result = chain not in _logged_result_shapes
        _logged_result_shapes.add(chain)
    if first_result:
        log.debug("[EVM][QUOTE] chain=%s quoter result shape=%s", chain.value, type(result).__name__)
    if isinstance(result, (list, tuple)):
        if not result:
            raise RpcFailureError(f"Empty quoter result on {chain.value}.")
        return int(result[0])
    return int(result)


def scale_amount(raw_amount: int, decimals: int) -> float:
    """Convert an integer token amount into human units (true division)."""
    return float(Decimal(int(raw_amount)) / (Decimal(10) ** int(decimals)))


async def _quote_exact_input_single(connection: EvmConnection, config: ChainConfig) -> QuoterResult:
    web3 = connection.web3
    quoter = web3.eth.contract(address=AsyncWeb3.to_checksum_address(config.quoter_address), abi=QUOTER_V2_ABI)
    params = (
        AsyncWeb3.to_checksum_address(config.wrapped_native_address),
        AsyncWeb3.to_checksum_address(config.stable_address),
        QUOTE_AMOUNT_IN,
        int(config.pool_fee),
        NO_SQRT_PRICE_LIMIT,
    )
    return await quoter.functions.quoteExactInputSingle(params).call()


async def fetch_evm_price(config: ChainConfig) -> float:
    """
    Price of one native token in the reference stablecoin, from the quoter.

    Raises:
        InvalidChainTypeError: `config` is not an EVM chain.
        UnsupportedChainError: no RPC handle can be built for the chain.
        RpcFailureError: the eth_call failed.
    """
    if config.type != ChainType.EVM:
        raise InvalidChainTypeError(f"Invalid chain type for EVM fetcher: {config.type.value}")

    connection = get_evm_connection(config)
    try:
        result = await _quote_exact_input_single(connection, config)
    except Exception as error:
        log.warning("[EVM][QUOTE] eth_call failed on %s (%s).", config.id.value, error)
        raise RpcFailureError(f"Quoter call failed on {config.id.value}: {error}") from error

    amount_out = _extract_amount_out(config.id, result)
    price = scale_amount(amount_out, config.stable_decimals)
    log.debug("[EVM][QUOTE] chain=%s fee=%s amount_out=%d decimals=%d → price=%.6f",
              config.id.value, config.pool_fee, amount_out, config.stable_decimals, price)
    return price
