"""Funding payments received or paid on perpetual positions."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, List, Optional

from ftx_rest.request import QueryParams, Request, optional_params, time_window, validate_window
from ftx_rest.types import Method, Model


class FundingPayment(Model, kw_only=True):
    future: str
    id: int
    payment: Decimal
    rate: Decimal
    time: datetime


@dataclass(frozen=True, slots=True)
class GetFundingPayments(Request[List[FundingPayment]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/funding_payments"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[FundingPayment]

    future: Optional[str] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        validate_window("GetFundingPayments", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return optional_params(("future", self.future)) + time_window(
            self.start_time, self.end_time)
