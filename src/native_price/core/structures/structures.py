from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from native_price.core.structures.errors import InvalidChainConfigError


class ChainId(str, Enum):
    ETHEREUM = "ethereum"
    BSC = "bsc"
    BASE = "base"
    SOLANA = "solana"


class ChainType(str, Enum):
    EVM = "evm"
    SOLANA = "solana"


_EVM_ONLY_FIELDS = (
    "quoter_address",
    "wrapped_native_address",
    "stable_address",
    "stable_decimals",
    "pool_fee",
)


@dataclass(frozen=True)
class ChainConfig:
    """
    Connection and quoting parameters for one chain.

    The EVM-only fields are required when `type` is EVM and ignored otherwise.
    """
    id: ChainId
    name: str
    type: ChainType
    symbol: str
    rpc_url: str
    quoter_address: Optional[str] = None
    wrapped_native_address: Optional[str] = None
    stable_address: Optional[str] = None
    stable_decimals: Optional[int] = None
    pool_fee: Optional[int] = None

    def __post_init__(self) -> None:
        if self.type == ChainType.EVM:
            missing = [name for name in _EVM_ONLY_FIELDS if getattr(self, name) is None]
            if missing:
                raise InvalidChainConfigError(
                    f"EVM chain '{self.id.value}' is missing required fields: {', '.join(missing)}"
                )


@dataclass(frozen=True)
class ChainConfigOverride:
    """Partial ChainConfig; a field left to None inherits the default value."""
    name: Optional[str] = None
    type: Optional[ChainType] = None
    symbol: Optional[str] = None
    rpc_url: Optional[str] = None
    quoter_address: Optional[str] = None
    wrapped_native_address: Optional[str] = None
    stable_address: Optional[str] = None
    stable_decimals: Optional[int] = None
    pool_fee: Optional[int] = None


@dataclass(frozen=True)
class FetchOptions:
    """Per-call overrides; nothing here outlives the call it is passed to."""
    rpc_urls: Mapping[ChainId, str] = field(default_factory=dict)
    chain_configs: Mapping[ChainId, ChainConfigOverride] = field(default_factory=dict)


@dataclass(frozen=True)
class PriceResult:
    chain: ChainId
    symbol: str
    price: float
    timestamp: datetime

    def to_dict(self) -> Dict[str, Union[str, float]]:
        """Serialize to a plain JSON-friendly dict."""
        return {
            "chain": self.chain.value,
            "symbol": self.symbol,
            "price": float(self.price),
            "timestamp": self.timestamp.isoformat(),
        }
