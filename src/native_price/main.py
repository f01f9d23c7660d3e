from __future__ import annotations

from native_price.logging.logger import init_logging

init_logging()

import argparse
import asyncio
import json
import sys
from typing import List, Optional, Sequence

from native_price.core.chains import SUPPORTED_CHAINS
from native_price.core.orchestrator import get_all_prices, get_price
from native_price.core.structures.errors import PriceFetchError
from native_price.core.structures.structures import PriceResult
from native_price.logging.logger import get_logger

log = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="native-price", description="Fetch native asset prices per chain.")
    parser.add_argument(
        "chains",
        nargs="*",
        metavar="CHAIN",
        help=f"chains to query (default: all of {', '.join(chain.value for chain in SUPPORTED_CHAINS)})",
    )
    parser.add_argument("--json", action="store_true", help="print JSON documents instead of text")
    return parser


async def _collect(chains: Sequence[str]) -> List[PriceResult]:
    if not chains:
        return list((await get_all_prices()).values())

    results: List[PriceResult] = []
    for chain in chains:
        try:
            results.append(await get_price(chain))
        except PriceFetchError as error:
            log.error("[MAIN] %s: %s", chain, error)
    return results


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    results = asyncio.run(_collect(args.chains))

    if args.json:
        print(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        for result in results:
            print(f"{result.chain.value}: ${result.price:.2f} ({result.symbol})")

    return 0 if results else 1


if __name__ == "__main__":
    sys.exit(main())
