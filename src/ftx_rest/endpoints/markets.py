"""Public market data: listings, order books, trades and candles."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, FrozenSet, List, Optional, Tuple

import msgspec

from ftx_rest.request import (
    QueryParams,
    Request,
    optional_params,
    require,
    time_window,
    validate_window,
)
from ftx_rest.types import Method, Model, Side, is_valid_resolution

MAX_BOOK_DEPTH = 100


class MarketType(str, Enum):
    FUTURE = "future"
    SPOT = "spot"


# --- Payloads ---

class Market(Model, kw_only=True):
    name: str
    type: MarketType
    underlying: Optional[str] = None
    base_currency: Optional[str] = None
    quote_currency: Optional[str] = None
    enabled: bool
    ask: Optional[Decimal] = None
    bid: Optional[Decimal] = None
    last: Optional[Decimal] = None
    price: Optional[Decimal] = None
    post_only: bool
    price_increment: Decimal
    size_increment: Decimal
    min_provide_size: Decimal
    restricted: bool
    tokenized_equity: Optional[bool] = None
    high_leverage_fee_exempt: Optional[bool] = None
    price_high_24h: Optional[Decimal] = msgspec.field(default=None, name="priceHigh24h")
    price_low_24h: Optional[Decimal] = msgspec.field(default=None, name="priceLow24h")
    change_1h: Optional[Decimal] = msgspec.field(default=None, name="change1h")
    change_24h: Optional[Decimal] = msgspec.field(default=None, name="change24h")
    change_bod: Optional[Decimal] = None
    quote_volume_24h: Optional[Decimal] = msgspec.field(default=None, name="quoteVolume24h")
    volume_usd_24h: Optional[Decimal] = msgspec.field(default=None, name="volumeUsd24h")
    large_order_threshold: Optional[Decimal] = None
    is_etf_market: Optional[bool] = None


class OrderBook(Model, kw_only=True):
    asks: List[Tuple[Decimal, Decimal]]  # (price, size)
    bids: List[Tuple[Decimal, Decimal]]


class Trade(Model, kw_only=True):
    id: int
    liquidation: bool
    price: Decimal
    side: Side
    size: Decimal
    time: datetime


class Candle(Model, kw_only=True):
    close: Decimal
    high: Decimal
    low: Decimal
    open: Decimal
    volume: Optional[Decimal] = None
    start_time: datetime
    time: float  # ms epoch


# --- Descriptors ---

@dataclass(frozen=True, slots=True)
class GetMarkets(Request[List[Market]]):
    """Retrieve info on all markets."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/markets"
    RESPONSE: ClassVar[Any] = List[Market]


@dataclass(frozen=True, slots=True)
class GetMarket(Request[Market]):
    """Retrieve info on a single market."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/markets/{market}"
    MULTI_SEGMENT: ClassVar[FrozenSet[str]] = frozenset({"market"})
    RESPONSE: ClassVar[Any] = Market

    market: str


@dataclass(frozen=True, slots=True)
class GetOrderBook(Request[OrderBook]):
    """Retrieve an order book snapshot, optionally limited to ``depth`` levels."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/markets/{market}/orderbook"
    MULTI_SEGMENT: ClassVar[FrozenSet[str]] = frozenset({"market"})
    RESPONSE: ClassVar[Any] = OrderBook

    market: str
    depth: Optional[int] = None

    def validate(self) -> None:
        if self.depth is not None:
            require(1 <= self.depth <= MAX_BOOK_DEPTH,
                    f"GetOrderBook: depth must be in 1..{MAX_BOOK_DEPTH}, got {self.depth}")

    def query_params(self) -> QueryParams:
        return optional_params(("depth", None if self.depth is None else str(self.depth)))


@dataclass(frozen=True, slots=True)
class GetTrades(Request[List[Trade]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/markets/{market}/trades"
    MULTI_SEGMENT: ClassVar[FrozenSet[str]] = frozenset({"market"})
    RESPONSE: ClassVar[Any] = List[Trade]

    market: str
    start_time: Optional[int] = None  # seconds epoch
    end_time: Optional[int] = None

    def validate(self) -> None:
        validate_window("GetTrades", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return time_window(self.start_time, self.end_time)


@dataclass(frozen=True, slots=True)
class GetCandles(Request[List[Candle]]):
    """Historical prices; ``resolution`` is the window length in seconds."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/markets/{market}/candles"
    MULTI_SEGMENT: ClassVar[FrozenSet[str]] = frozenset({"market"})
    RESPONSE: ClassVar[Any] = List[Candle]

    market: str
    resolution: int
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        require(is_valid_resolution(int(self.resolution)),
                f"GetCandles: unsupported resolution {self.resolution}")
        validate_window("GetCandles", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return [("resolution", str(int(self.resolution)))] + time_window(
            self.start_time, self.end_time)
