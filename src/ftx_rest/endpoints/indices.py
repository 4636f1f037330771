"""Index composition and historical index prices."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional, Tuple

from ftx_rest.request import QueryParams, Request, require, time_window, validate_window
from ftx_rest.types import Method, Model, is_valid_resolution

# (exchange, base currency, quote currency)
Constituent = Tuple[str, str, str]


class IndexCandle(Model, kw_only=True):
    close: Decimal
    high: Decimal
    low: Decimal
    open: Decimal
    start_time: datetime
    time: float
    volume: None = None  # always null for indices


@dataclass(frozen=True, slots=True)
class GetIndexWeights(Request[Dict[str, Decimal]]):
    """Weight of each underlying in an index, keyed by underlying."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/indexes/{index}/weights"
    RESPONSE: ClassVar[Any] = Dict[str, Decimal]

    index: str


@dataclass(frozen=True, slots=True)
class GetIndexCandles(Request[List[IndexCandle]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/indexes/{index}/candles"
    RESPONSE: ClassVar[Any] = List[IndexCandle]

    index: str
    resolution: int
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        require(is_valid_resolution(int(self.resolution)),
                f"GetIndexCandles: unsupported resolution {self.resolution}")
        validate_window("GetIndexCandles", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return [("resolution", str(int(self.resolution)))] + time_window(
            self.start_time, self.end_time)


@dataclass(frozen=True, slots=True)
class GetIndexConstituents(Request[List[Constituent]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/index_constituents/{underlying}"
    RESPONSE: ClassVar[Any] = List[Constituent]

    underlying: str
