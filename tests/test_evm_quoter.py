import dataclasses
import logging

import pytest
from web3 import AsyncWeb3

from native_price.core.chains import DEFAULT_CHAINS
from native_price.core.onchain import evm_quoter
from native_price.core.onchain.evm_quoter import (
    EvmConnection,
    fetch_evm_price,
    get_evm_connection,
    scale_amount,
)
from native_price.core.structures.errors import InvalidChainTypeError, RpcFailureError, UnsupportedChainError
from native_price.core.structures.structures import ChainId, ChainType

ETHEREUM = DEFAULT_CHAINS[ChainId.ETHEREUM]
BSC = DEFAULT_CHAINS[ChainId.BSC]


class FakeCall:
    def __init__(self, result):
        self._result = result

    async def call(self):
        if isinstance(self._result, Exception):
            raise self._result
        return self._result


class FakeFunctions:
    def __init__(self, result, calls):
        self._result = result
        self._calls = calls

    def quoteExactInputSingle(self, params):
        self._calls.append(params)
        return FakeCall(self._result)


class FakeContract:
    def __init__(self, result, calls):
        self.functions = FakeFunctions(result, calls)


class FakeEth:
    def __init__(self, result):
        self.result = result
        self.calls = []
        self.addresses = []

    def contract(self, address, abi):
        self.addresses.append(address)
        return FakeContract(self.result, self.calls)


class FakeWeb3:
    def __init__(self, result):
        self.eth = FakeEth(result)


@pytest.fixture
def fake_connection(monkeypatch):
    """Route quoter calls to a fake web3 returning the given result."""
    def install(result, config=ETHEREUM):
        web3 = FakeWeb3(result)
        connection = EvmConnection(chain=config.id, network_id=1, rpc_url=config.rpc_url, web3=web3)
        monkeypatch.setattr(evm_quoter, "get_evm_connection", lambda _config: connection)
        return web3
    return install


@pytest.mark.asyncio
async def test_tuple_result_is_scaled_by_stable_decimals(fake_connection):
    fake_connection((250_000_000, 1234, 2, 90_000))

    assert await fetch_evm_price(ETHEREUM) == 250.0


@pytest.mark.asyncio
async def test_bare_integer_result_is_accepted(fake_connection):
    fake_connection(250_000_000)

    assert await fetch_evm_price(ETHEREUM) == 250.0


@pytest.mark.asyncio
async def test_eighteen_decimals_stablecoin(fake_connection):
    fake_connection([612_345_000_000_000_000_000, 0, 0, 0], config=BSC)

    assert await fetch_evm_price(BSC) == pytest.approx(612.345)


@pytest.mark.asyncio
async def test_call_arguments_are_encoded_as_struct_tuple(fake_connection):
    web3 = fake_connection((3_000_000_000, 0, 0, 0))

    await fetch_evm_price(ETHEREUM)

    assert web3.eth.addresses == [AsyncWeb3.to_checksum_address(ETHEREUM.quoter_address)]
    token_in, token_out, amount_in, fee, sqrt_price_limit = web3.eth.calls[0]
    assert token_in == AsyncWeb3.to_checksum_address(ETHEREUM.wrapped_native_address)
    assert token_out == AsyncWeb3.to_checksum_address(ETHEREUM.stable_address)
    assert amount_in == 10 ** 18
    assert isinstance(amount_in, int)
    assert fee == 3000
    assert sqrt_price_limit == 0


@pytest.mark.asyncio
async def test_rpc_error_is_wrapped(fake_connection):
    fake_connection(ConnectionError("node down"))

    with pytest.raises(RpcFailureError) as info:
        await fetch_evm_price(ETHEREUM)

    assert isinstance(info.value.__cause__, ConnectionError)


@pytest.mark.asyncio
async def test_non_evm_config_is_rejected_before_any_call(monkeypatch):
    def fail(_config):
        raise AssertionError("no connection expected")

    monkeypatch.setattr(evm_quoter, "get_evm_connection", fail)

    with pytest.raises(InvalidChainTypeError):
        await fetch_evm_price(DEFAULT_CHAINS[ChainId.SOLANA])


def test_scale_amount_is_true_division():
    assert scale_amount(250_000_000, 6) == 250.0
    assert scale_amount(1, 6) == 0.000001
    assert scale_amount(1_500_000, 6) == 1.5


def test_connection_is_cached_per_chain():
    first = get_evm_connection(ETHEREUM)
    second = get_evm_connection(ETHEREUM)

    assert first is second
    assert first.network_id == 1
    assert get_evm_connection(BSC).network_id == 56


def test_connection_is_rebuilt_for_another_rpc_url():
    first = get_evm_connection(ETHEREUM)
    second = get_evm_connection(dataclasses.replace(ETHEREUM, rpc_url="https://eth.example"))

    assert first is not second
    assert second.rpc_url == "https://eth.example"


def test_connection_for_chain_without_evm_network_is_unsupported():
    config = dataclasses.replace(
        ETHEREUM,
        id=ChainId.SOLANA,
        type=ChainType.EVM,
    )

    with pytest.raises(UnsupportedChainError):
        get_evm_connection(config)


def test_module_docstring_describes_quoter():
    assert evm_quoter.__doc__ is not None
    assert "QuoterV2" in evm_quoter.__doc__


@pytest.mark.asyncio
async def test_result_shape_is_logged_once_per_chain(fake_connection, caplog):
    fake_connection((250_000_000, 0, 0, 0))
    caplog.set_level(logging.DEBUG, logger="native_price")

    await fetch_evm_price(ETHEREUM)
    await fetch_evm_price(ETHEREUM)

    shape_lines = [record for record in caplog.records if "quoter result shape" in record.getMessage()]
    assert len(shape_lines) == 1
    assert "tuple" in shape_lines[0].getMessage()


def test_alternating_rpc_urls_keep_only_the_latest_handle():
    override = dataclasses.replace(ETHEREUM, rpc_url="https://eth.example")

    first = get_evm_connection(ETHEREUM)
    get_evm_connection(override)
    again = get_evm_connection(ETHEREUM)

    assert again is not first
    assert again.rpc_url == ETHEREUM.rpc_url
    assert get_evm_connection(ETHEREUM) is again
