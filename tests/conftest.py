import pytest

from native_price.core.onchain import evm_quoter


@pytest.fixture(autouse=True)
def _reset_evm_connections():
    evm_quoter.clear_evm_connections()
    yield
    evm_quoter.clear_evm_connections()
