"""Order placement, modification, cancellation and queries.

Orders can be addressed by the exchange-issued id or by the client id given at
placement; pass exactly one of ``order_id`` / ``client_id``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional
from urllib.parse import quote

from ftx_rest.request import (
    QueryParams,
    Request,
    optional_fields,
    optional_params,
    require,
    require_positive,
    time_window,
    valid_segment,
    validate_window,
)
from ftx_rest.types import Method, Model, OrderStatus, OrderType, Side


class Order(Model, kw_only=True):
    id: int
    client_id: Optional[str] = None
    market: str
    future: Optional[str] = None
    side: Side
    type: OrderType
    status: OrderStatus
    size: Decimal
    price: Optional[Decimal] = None
    avg_fill_price: Optional[Decimal] = None
    filled_size: Decimal
    remaining_size: Decimal
    reduce_only: bool
    ioc: bool
    post_only: bool
    liquidation: Optional[bool] = None
    created_at: datetime


@dataclass(frozen=True, slots=True)
class OrderOpts:
    """Optional flags for :class:`PlaceOrder`; unset flags are not sent."""
    ioc: Optional[bool] = None
    post_only: Optional[bool] = None
    reduce_only: Optional[bool] = None
    reject_on_price_band: Optional[bool] = None
    reject_after_ts: Optional[int] = None

    def to_body(self) -> Dict[str, Any]:
        return optional_fields(
            ioc=self.ioc,
            postOnly=self.post_only,
            reduceOnly=self.reduce_only,
            rejectOnPriceBand=self.reject_on_price_band,
            rejectAfterTs=self.reject_after_ts,
        )


def order_path(template: str, order_id: Optional[int], client_id: Optional[str]) -> str:
    """Fill ``{order}`` with the exchange id or ``by_client_id/<client id>``."""
    if client_id is not None:
        ref = f"by_client_id/{quote(client_id, safe='')}"
    else:
        ref = str(order_id)
    return template.format(order=ref)


def validate_order_ref(name: str, order_id: Optional[int], client_id: Optional[str]) -> None:
    require((order_id is None) != (client_id is None),
            f"{name}: pass exactly one of order_id or client_id")
    if client_id is not None:
        require(valid_segment(client_id), f"{name}: invalid client_id {client_id!r}")


@dataclass(frozen=True, slots=True)
class GetOpenOrders(Request[List[Order]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/orders"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Order]

    market: Optional[str] = None

    def query_params(self) -> QueryParams:
        return optional_params(("market", self.market))


@dataclass(frozen=True, slots=True)
class GetOrderHistory(Request[List[Order]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/orders/history"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Order]

    market: Optional[str] = None
    side: Optional[Side] = None
    order_type: Optional[OrderType] = None
    start_time: Optional[int] = None
    end_time: Optional[int] = None

    def validate(self) -> None:
        validate_window("GetOrderHistory", self.start_time, self.end_time)

    def query_params(self) -> QueryParams:
        return optional_params(
            ("market", self.market),
            ("side", None if self.side is None else Side(self.side).value),
            ("orderType", None if self.order_type is None else OrderType(self.order_type).value),
        ) + time_window(self.start_time, self.end_time)


@dataclass(frozen=True, slots=True)
class GetOrderStatus(Request[Order]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/orders/{order}"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Order

    order_id: Optional[int] = None
    client_id: Optional[str] = None

    def validate(self) -> None:
        validate_order_ref("GetOrderStatus", self.order_id, self.client_id)

    def path(self) -> str:
        return order_path(self.PATH, self.order_id, self.client_id)


@dataclass(frozen=True, slots=True)
class PlaceOrder(Request[Order]):
    """Place an order. Leave ``price`` unset for a market order.

    ``order_type`` defaults to market when there is no price and limit
    otherwise.
    """
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/orders"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Order

    market: str
    side: Side
    size: Decimal
    price: Optional[Decimal] = None
    order_type: Optional[OrderType] = None
    client_id: Optional[str] = None
    opts: Optional[OrderOpts] = None

    @property
    def effective_type(self) -> OrderType:
        if self.order_type is not None:
            return OrderType(self.order_type)
        return OrderType.MARKET if self.price is None else OrderType.LIMIT

    def validate(self) -> None:
        require(bool(self.market), "PlaceOrder: market must not be empty")
        require_positive("PlaceOrder", "size", self.size)
        require_positive("PlaceOrder", "price", self.price)
        if self.effective_type is OrderType.LIMIT:
            require(self.price is not None, "PlaceOrder: limit orders need a price")

    def body(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "market": self.market,
            "side": Side(self.side).value,
            "price": self.price,
            "size": self.size,
            "type": self.effective_type.value,
        }
        if self.client_id is not None:
            payload["clientId"] = self.client_id
        if self.opts is not None:
            payload.update(self.opts.to_body())
        return payload


@dataclass(frozen=True, slots=True)
class EditOrder(Request[Order]):
    """Modify an open order. The exchange treats this as cancel-and-replace."""
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/orders/{order}/modify"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Order

    order_id: Optional[int] = None
    client_id: Optional[str] = None
    price: Optional[Decimal] = None
    size: Optional[Decimal] = None
    new_client_id: Optional[str] = None

    def validate(self) -> None:
        validate_order_ref("EditOrder", self.order_id, self.client_id)
        require_positive("EditOrder", "price", self.price)
        require_positive("EditOrder", "size", self.size)

    def path(self) -> str:
        return order_path(self.PATH, self.order_id, self.client_id)

    def body(self) -> Dict[str, Any]:
        return optional_fields(price=self.price, size=self.size,
                               clientId=self.new_client_id)


@dataclass(frozen=True, slots=True)
class CancelOrder(Request[str]):
    """Cancel one order; the result is the exchange's acknowledgement text."""
    METHOD: ClassVar[Method] = Method.DELETE
    PATH: ClassVar[str] = "/orders/{order}"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = str

    order_id: Optional[int] = None
    client_id: Optional[str] = None

    def validate(self) -> None:
        validate_order_ref("CancelOrder", self.order_id, self.client_id)

    def path(self) -> str:
        return order_path(self.PATH, self.order_id, self.client_id)


@dataclass(frozen=True, slots=True)
class CancelAllOrders(Request[str]):
    METHOD: ClassVar[Method] = Method.DELETE
    PATH: ClassVar[str] = "/orders"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = str

    market: Optional[str] = None
    side: Optional[Side] = None
    limit_orders_only: Optional[bool] = None

    def body(self) -> Dict[str, Any]:
        return optional_fields(
            market=self.market,
            side=None if self.side is None else Side(self.side).value,
            limitOrdersOnly=self.limit_orders_only,
        )
