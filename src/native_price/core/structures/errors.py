from __future__ import annotations


class PriceFetchError(Exception):
    """Base class for every failure raised while resolving a native asset price."""


class UnknownChainError(PriceFetchError, ValueError):
    """The requested chain identifier is not in the supported set."""

    def __init__(self, chain: object) -> None:
        super().__init__(f"Unknown chain: {chain!r}")
        self.chain = chain


class InvalidChainConfigError(PriceFetchError, ValueError):
    """An EVM chain configuration is missing one of its quoting fields."""


class InvalidChainTypeError(PriceFetchError):
    """A resolver was handed a configuration of the wrong chain type."""


class UnknownChainTypeError(PriceFetchError):
    """The dispatcher met a chain type it has no resolver for."""


class UnsupportedChainError(PriceFetchError):
    """No EVM network is known for the chain, so no RPC handle can be created."""


class RpcFailureError(PriceFetchError):
    """The quoter eth_call failed (transport, node or contract error)."""


class MarketDataUnavailableError(PriceFetchError):
    """The market-data aggregator returned a non-success or unusable response."""


class NoPriceAvailableError(PriceFetchError):
    """Market data was returned but no trading pair carried a usable USD price."""
