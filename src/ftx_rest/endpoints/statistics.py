"""Order latency statistics."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, List, Optional

from ftx_rest.request import QueryParams, Request, optional_params, require
from ftx_rest.types import Method, Model


class LatencyStats(Model, kw_only=True):
    bursty: bool
    p50: Decimal  # seconds
    request_count: int


@dataclass(frozen=True, slots=True)
class GetLatencyStatistics(Request[List[LatencyStats]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/stats/latency_stats"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[LatencyStats]

    days: Optional[int] = None
    subaccount_nickname: Optional[str] = None

    def validate(self) -> None:
        if self.days is not None:
            require(self.days > 0, f"GetLatencyStatistics: days must be positive, got {self.days}")

    def query_params(self) -> QueryParams:
        return optional_params(
            ("days", None if self.days is None else str(self.days)),
            ("subaccount_nickname", self.subaccount_nickname),
        )
