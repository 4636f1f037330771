"""Spot margin borrowing: rates, market info and history."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, List, Optional

from ftx_rest.request import QueryParams, Request, require, time_window, validate_window
from ftx_rest.types import Method, Model


class BorrowRate(Model, kw_only=True):
    coin: str
    estimate: Decimal
    previous: Decimal


class BorrowAmount(Model, kw_only=True):
    coin: str
    size: Decimal


class BorrowMarket(Model, kw_only=True):
    coin: str
    borrowed: Decimal
    free: Decimal
    estimated_rate: Decimal
    previous_rate: Decimal


class BorrowPayment(Model, kw_only=True):
    coin: str
    cost: Decimal
    fee_usd: Decimal
    rate: Decimal
    size: Decimal
    time: datetime


@dataclass(frozen=True, slots=True)
class GetBorrowRates(Request[List[BorrowRate]]):
    """Latest borrow rates for every spot-margin coin."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/spot_margin/borrow_rates"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[BorrowRate]


@dataclass(frozen=True, slots=True)
class GetDailyBorrowedAmounts(Request[List[BorrowAmount]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/spot_margin/borrow_summary"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[BorrowAmount]


@dataclass(frozen=True, slots=True)
class GetBorrowMarketInfo(Request[List[BorrowMarket]]):
    """Borrow figures for the base and quote coin of one spot market."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/spot_margin/market_info"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[BorrowMarket]

    market: str

    def validate(self) -> None:
        require(bool(self.market), "GetBorrowMarketInfo: market must not be empty")

    def query_params(self) -> QueryParams:
        return [("market", self.market)]


@dataclass(frozen=True, slots=True)
class GetBorrowHistory(Request[List[BorrowPayment]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/spot_margin/borrow_history"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[BorrowPayment]

    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        validate_window("GetBorrowHistory", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return time_window(self.start_time, self.end_time)
