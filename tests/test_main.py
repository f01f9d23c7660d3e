import json
from datetime import datetime

from native_price import main as main_module
from native_price.core.structures.errors import UnknownChainError
from native_price.core.structures.structures import ChainId, PriceResult

NOW = datetime(2026, 10, 19, 12, 0).astimezone()


def _result(chain, symbol, price):
    return PriceResult(chain=chain, symbol=symbol, price=price, timestamp=NOW)


def test_main_prints_all_prices(monkeypatch, capsys):
    async def fake_get_all_prices():
        return {
            ChainId.ETHEREUM: _result(ChainId.ETHEREUM, "ETH", 3100.456),
            ChainId.SOLANA: _result(ChainId.SOLANA, "SOL", 187.2),
        }

    monkeypatch.setattr(main_module, "get_all_prices", fake_get_all_prices)

    assert main_module.main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["ethereum: $3100.46 (ETH)", "solana: $187.20 (SOL)"]


def test_main_json_for_selected_chains(monkeypatch, capsys):
    async def fake_get_price(chain):
        if chain == "bsc":
            return _result(ChainId.BSC, "BNB", 612.0)
        raise UnknownChainError(chain)

    monkeypatch.setattr(main_module, "get_price", fake_get_price)

    assert main_module.main(["bsc", "dogechain", "--json"]) == 0
    documents = json.loads(capsys.readouterr().out)
    assert [document["chain"] for document in documents] == ["bsc"]
    assert documents[0]["price"] == 612.0


def test_main_fails_when_nothing_resolved(monkeypatch, capsys):
    async def fake_get_all_prices():
        return {}

    monkeypatch.setattr(main_module, "get_all_prices", fake_get_all_prices)

    assert main_module.main([]) == 1
