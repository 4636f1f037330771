"""Wallet coins and balances."""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar, Dict, List, Optional

from ftx_rest.request import Request
from ftx_rest.types import Method, Model


class Coin(Model, kw_only=True):
    id: str
    name: str
    fiat: bool
    is_token: bool
    is_etf: bool
    tokenized_equity: Optional[bool] = None
    spot_margin: bool
    collateral: bool
    collateral_weight: Decimal
    usd_fungible: bool
    can_convert: bool
    can_deposit: bool
    can_withdraw: bool
    erc20_contract: Optional[str] = None
    trc20_contract: Optional[str] = None
    bep2_asset: Optional[str] = None
    spl_mint: Optional[str] = None
    methods: List[str] = []
    has_tag: bool
    credit_to: Optional[str] = None
    hidden: bool
    image_url: Optional[str] = None
    nft_quote_currency_eligible: bool
    imf_weight: Decimal
    index_price: Optional[float] = None  # scale is too erratic for Decimal


class Balance(Model, kw_only=True):
    coin: str
    free: Decimal
    spot_borrow: Decimal
    total: Decimal
    usd_value: Decimal
    available_without_borrow: Decimal
    available_for_withdrawal: Optional[Decimal] = None


@dataclass(frozen=True, slots=True)
class GetCoins(Request[List[Coin]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/wallet/coins"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Coin]


@dataclass(frozen=True, slots=True)
class GetBalances(Request[List[Balance]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/wallet/balances"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Balance]


@dataclass(frozen=True, slots=True)
class GetAllBalances(Request[Dict[str, List[Balance]]]):
    """Balances of every account, keyed by account name (``main`` for the
    main account)."""
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/wallet/all_balances"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Dict[str, List[Balance]]
