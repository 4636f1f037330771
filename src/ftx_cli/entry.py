"""Console entry point for the ftx-rest package.

After ``pip install .`` the ``ftx-rest`` command fetches public market data
and prints the exchange's ``result`` as JSON::

    ftx-rest market BTC-PERP
    ftx-rest orderbook BTC-PERP --depth 5
    ftx-rest --config config.yaml --timeout 5 futures
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import orjson
import yaml
from rich.console import Console

from ftx_rest import Client, ClientConfig, FtxError, Request
from ftx_rest.endpoints import GetFutures, GetMarket, GetMarkets, GetOrderBook

log = logging.getLogger("ftx_cli")


def setup_logging(level: str = "INFO") -> None:
    fmt = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=fmt,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ftx-rest", description="FTX REST public data")
    parser.add_argument("--config", metavar="PATH",
                        help="YAML file with base_url / api_prefix / timeout")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Request timeout in seconds")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("markets", help="List all markets")
    market = sub.add_parser("market", help="Show one market")
    market.add_argument("name", help="Market name, e.g. BTC-PERP or BTC/USD")
    book = sub.add_parser("orderbook", help="Show an order book snapshot")
    book.add_argument("name")
    book.add_argument("--depth", type=int, default=None, help="Levels per side (1-100)")
    sub.add_parser("futures", help="List all futures")
    return parser


def build_request(args: argparse.Namespace) -> Request:
    if args.command == "markets":
        return GetMarkets()
    if args.command == "market":
        return GetMarket(market=args.name)
    if args.command == "orderbook":
        return GetOrderBook(market=args.name, depth=args.depth)
    return GetFutures()


async def run(args: argparse.Namespace, console: Console) -> int:
    config = ClientConfig.from_yaml(args.config) if args.config else ClientConfig()
    request = build_request(args)
    async with Client(config=config) as client:
        response = await client.execute(request, timeout=args.timeout)
    if response.is_rate_limited:
        log.warning("Rate limited (HTTP 429)")
    result = response.deserialize_partial()
    console.print_json(orjson.dumps(result).decode())
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ftx-rest`` console command."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)
    console = Console()
    try:
        code = asyncio.run(run(args, console))
    except FtxError as exc:
        Console(stderr=True).print(f"[red]error:[/red] {exc}")
        code = 1
    except (OSError, ValueError, yaml.YAMLError) as exc:
        Console(stderr=True).print(f"[red]config error:[/red] {exc}")
        code = 2
    sys.exit(code)


if __name__ == "__main__":
    main()
