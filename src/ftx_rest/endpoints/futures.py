"""Futures listings, stats and funding rates."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, List, Optional

import msgspec

from ftx_rest.request import QueryParams, Request, optional_params, time_window, validate_window
from ftx_rest.types import Method, Model


class FutureType(str, Enum):
    PERPETUAL = "perpetual"
    FUTURE = "future"
    MOVE = "move"
    PREDICTION = "prediction"


class FutureGroup(str, Enum):
    PERPETUAL = "perpetual"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    PREDICTION = "prediction"


class ExpiredFuture(Model, kw_only=True):
    name: str
    underlying: str
    description: str
    underlying_description: str
    expiry_description: str
    type: FutureType
    group: FutureGroup
    expiry: Optional[datetime] = None
    perpetual: bool
    expired: bool
    enabled: bool
    post_only: bool
    price_increment: Decimal
    size_increment: Decimal
    last: Optional[Decimal] = None
    bid: Optional[Decimal] = None
    ask: Optional[Decimal] = None
    index: Optional[Decimal] = None
    mark: Optional[Decimal] = None
    imf_factor: Decimal
    lower_bound: Optional[Decimal] = None
    upper_bound: Optional[Decimal] = None
    margin_price: Optional[Decimal] = None
    position_limit_weight: Decimal
    move_start: Optional[datetime] = None


class Future(ExpiredFuture, kw_only=True):
    """A live future; adds trading activity to the listing fields."""
    change_1h: Optional[Decimal] = msgspec.field(default=None, name="change1h")
    change_24h: Optional[Decimal] = msgspec.field(default=None, name="change24h")
    change_bod: Optional[Decimal] = None
    volume_usd_24h: Decimal = msgspec.field(name="volumeUsd24h")
    volume: Decimal
    open_interest: Decimal
    open_interest_usd: Decimal


class FutureStats(Model, kw_only=True):
    volume: Decimal
    next_funding_rate: Optional[Decimal] = None
    next_funding_time: Optional[datetime] = None
    expiration_price: Optional[Decimal] = None
    predicted_expiration_price: Optional[Decimal] = None
    strike_price: Optional[Decimal] = None
    open_interest: Decimal


class FundingRate(Model, kw_only=True):
    future: str
    rate: Decimal
    time: datetime


@dataclass(frozen=True, slots=True)
class GetFutures(Request[List[Future]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/futures"
    RESPONSE: ClassVar[Any] = List[Future]


@dataclass(frozen=True, slots=True)
class GetFuture(Request[Future]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/futures/{future}"
    RESPONSE: ClassVar[Any] = Future

    future: str


@dataclass(frozen=True, slots=True)
class GetFutureStats(Request[FutureStats]):
    """Future statistics, including the predicted funding rate."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/futures/{future}/stats"
    RESPONSE: ClassVar[Any] = FutureStats

    future: str


@dataclass(frozen=True, slots=True)
class GetFundingRates(Request[List[FundingRate]]):
    """Historical funding rates, optionally for one perpetual."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/funding_rates"
    RESPONSE: ClassVar[Any] = List[FundingRate]

    perpetual: Optional[str] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        validate_window("GetFundingRates", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return optional_params(("future", self.perpetual)) + time_window(
            self.start_time, self.end_time)


@dataclass(frozen=True, slots=True)
class GetExpiredFutures(Request[List[ExpiredFuture]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/expired_futures"
    RESPONSE: ClassVar[Any] = List[ExpiredFuture]
