from __future__ import annotations

import os


def _as_bool(value: str | None, default: bool = False) -> bool:
    """Parse a truthy/falsey string into a boolean."""
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


class Settings:
    # Default RPC endpoints (per-call overrides go through FetchOptions)
    ETHEREUM_RPC_URL: str = os.getenv("ETHEREUM_RPC_URL", "https://ethereum-rpc.publicnode.com")
    BSC_RPC_URL: str = os.getenv("BSC_RPC_URL", "https://bsc-rpc.publicnode.com")
    BASE_RPC_URL: str = os.getenv("BASE_RPC_URL", "https://base-rpc.publicnode.com")
    SOLANA_RPC_URL: str = os.getenv("SOLANA_RPC_URL", "https://api.mainnet-beta.solana.com")
    EVM_RPC_TIMEOUT_SECONDS: float = float(os.getenv("EVM_RPC_TIMEOUT_SECONDS", "30"))

    # Dexscreener client
    DEXSCREENER_BASE_URL: str = os.getenv("DEXSCREENER_BASE_URL", "https://api.dexscreener.com")
    DEXSCREENER_HTTP_TIMEOUT_SECONDS: float = float(os.getenv("DEXSCREENER_HTTP_TIMEOUT_SECONDS", "15"))

    # Debug / logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_LEVEL_NATIVE_PRICE: str = os.getenv("LOG_LEVEL_NATIVE_PRICE", "INFO").upper()
    LOG_LEVEL_LIB_URLLIB3: str = os.getenv("LOG_LEVEL_LIB_URLLIB3", "WARNING").upper()
    LOG_LEVEL_LIB_HTTPX: str = os.getenv("LOG_LEVEL_LIB_HTTPX", "WARNING").upper()
    LOG_LEVEL_LIB_HTTPCORE: str = os.getenv("LOG_LEVEL_LIB_HTTPCORE", "WARNING").upper()
    LOG_LEVEL_LIB_WEB3: str = os.getenv("LOG_LEVEL_LIB_WEB3", "WARNING").upper()
    LOG_LEVEL_LIB_ASYNCIO: str = os.getenv("LOG_LEVEL_LIB_ASYNCIO", "WARNING").upper()
    NO_COLOR: bool = _as_bool(os.getenv("NO_COLOR"), False)


settings = Settings()
