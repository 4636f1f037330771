"""Account fills."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, List, Optional

from ftx_rest.request import QueryParams, Request, optional_params, validate_window
from ftx_rest.types import Method, Model, Side, SortOrder


class FillType(str, Enum):
    ORDER = "order"
    OTC = "otc"


class Liquidity(str, Enum):
    TAKER = "taker"
    MAKER = "maker"


class Fill(Model, kw_only=True):
    id: int
    market: str
    future: Optional[str] = None
    base_currency: Optional[str] = None
    quote_currency: Optional[str] = None
    side: Side
    price: Decimal
    size: Decimal
    time: datetime
    order_id: Optional[int] = None
    trade_id: Optional[int] = None
    type: FillType
    liquidity: Liquidity
    fee: Decimal
    fee_currency: str
    fee_rate: Decimal


@dataclass(frozen=True, slots=True)
class GetFills(Request[List[Fill]]):
    """Fills, newest first unless ``order`` is ascending."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/fills"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Fill]

    market: Optional[str] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None
    order_id: Optional[int] = None
    order: Optional[SortOrder] = None

    def validate(self) -> None:
        validate_window("GetFills", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        # descending is the exchange default and is never sent
        ascending = self.order is not None and SortOrder(self.order) is SortOrder.ASCENDING
        return optional_params(
            ("market", self.market),
            ("start_time", None if self.start_time is None else str(self.start_time)),
            ("end_time", None if self.end_time is None else str(self.end_time)),
            ("orderId", None if self.order_id is None else str(self.order_id)),
            ("order", SortOrder.ASCENDING.value if ascending else None),
        )
