"""Account information, positions and leverage."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional

from ftx_rest.request import QueryParams, Request, require
from ftx_rest.types import Method, Model, Side, qbool

ACCOUNT_LEVERAGES = (1, 2, 3, 5, 10, 20)


class Position(Model, kw_only=True):
    cost: Decimal
    entry_price: Optional[Decimal] = None
    estimated_liquidation_price: Optional[Decimal] = None
    future: str
    initial_margin_requirement: Decimal
    maintenance_margin_requirement: Decimal
    long_order_size: Decimal
    short_order_size: Decimal
    net_size: Decimal
    open_size: Decimal
    realized_pnl: Decimal
    side: Side
    size: Decimal
    unrealized_pnl: Decimal
    collateral_used: Decimal
    recent_average_open_price: Optional[Decimal] = None
    recent_break_even_price: Optional[Decimal] = None
    recent_pnl: Optional[Decimal] = None
    cumulative_buy_size: Optional[Decimal] = None
    cumulative_sell_size: Optional[Decimal] = None


class AccountInformation(Model, kw_only=True):
    account_identifier: int
    account_type: Optional[str] = None
    backstop_provider: bool
    collateral: Decimal
    free_collateral: Decimal
    initial_margin_requirement: Decimal
    maintenance_margin_requirement: Decimal
    leverage: Decimal
    futures_leverage: Optional[Decimal] = None
    liquidating: bool
    margin_fraction: Optional[Decimal] = None
    open_margin_fraction: Optional[Decimal] = None
    maker_fee: Decimal
    taker_fee: Decimal
    total_account_value: Decimal
    total_position_size: Decimal
    charge_interest_on_negative_usd: Optional[bool] = None
    position_limit: Optional[Decimal] = None
    position_limit_used: Optional[Decimal] = None
    use_ftt_collateral: bool
    username: str
    spot_lending_enabled: Optional[bool] = None
    spot_margin_enabled: Optional[bool] = None
    spot_margin_withdrawals_enabled: Optional[bool] = None
    positions: List[Position] = []


@dataclass(frozen=True, slots=True)
class GetAccountInformation(Request[AccountInformation]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/account"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = AccountInformation


@dataclass(frozen=True, slots=True)
class GetPositions(Request[List[Position]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/positions"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Position]

    show_avg_price: Optional[bool] = None

    def query_params(self) -> QueryParams:
        if self.show_avg_price is None:
            return []
        return [("showAvgPrice", qbool(self.show_avg_price))]


@dataclass(frozen=True, slots=True)
class ChangeAccountLeverage(Request[None]):
    """Set account-wide leverage; only the exchange's fixed steps are accepted."""
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/account/leverage"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = None

    leverage: int

    def validate(self) -> None:
        require(self.leverage in ACCOUNT_LEVERAGES,
                f"ChangeAccountLeverage: leverage must be one of {ACCOUNT_LEVERAGES}, "
                f"got {self.leverage}")

    def body(self) -> Dict[str, Any]:
        return {"leverage": self.leverage}
