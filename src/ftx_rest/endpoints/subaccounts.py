"""Subaccount management and transfers."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from ftx_rest.request import Request, require, require_positive
from ftx_rest.types import Method, Model


class TransferStatus(str, Enum):
    COMPLETE = "complete"


class Subaccount(Model, kw_only=True):
    nickname: str
    deletable: bool
    editable: bool
    special: bool = False
    competition: bool = False


class SubaccountBalance(Model, kw_only=True):
    coin: str
    free: Decimal
    total: Decimal
    spot_borrow: Decimal
    available_without_borrow: Decimal
    available_for_withdrawal: Optional[Decimal] = None
    usd_value: Optional[Decimal] = None


class TransferDetails(Model, kw_only=True):
    id: int
    coin: str
    size: Decimal
    time: datetime
    notes: str = ""
    status: TransferStatus


def _require_nickname(name: str, nickname: str) -> None:
    require(bool(nickname), f"{name}: nickname must not be empty")


@dataclass(frozen=True, slots=True)
class GetSubaccounts(Request[List[Subaccount]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/subaccounts"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[Subaccount]


@dataclass(frozen=True, slots=True)
class CreateSubaccount(Request[Subaccount]):
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/subaccounts"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = Subaccount

    nickname: str

    def validate(self) -> None:
        _require_nickname("CreateSubaccount", self.nickname)

    def body(self) -> Dict[str, Any]:
        return {"nickname": self.nickname}


@dataclass(frozen=True, slots=True)
class ChangeSubaccountName(Request[None]):
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/subaccounts/update_name"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = None

    nickname: str
    new_nickname: str

    def validate(self) -> None:
        _require_nickname("ChangeSubaccountName", self.nickname)
        _require_nickname("ChangeSubaccountName", self.new_nickname)

    def body(self) -> Dict[str, Any]:
        return {"nickname": self.nickname, "newNickname": self.new_nickname}


@dataclass(frozen=True, slots=True)
class DeleteSubaccount(Request[None]):
    METHOD: ClassVar[Method] = Method.DELETE
    PATH: ClassVar[str] = "/subaccounts"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = None

    nickname: str

    def validate(self) -> None:
        _require_nickname("DeleteSubaccount", self.nickname)

    def body(self) -> Dict[str, Any]:
        return {"nickname": self.nickname}


@dataclass(frozen=True, slots=True)
class GetSubaccountBalances(Request[List[SubaccountBalance]]):
    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/subaccounts/{nickname}/balances"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = List[SubaccountBalance]

    nickname: str


@dataclass(frozen=True, slots=True)
class TransferBetweenSubaccounts(Request[TransferDetails]):
    """Move funds between subaccounts. ``None`` for source or destination
    means the main account.
    """
    METHOD: ClassVar[Method] = Method.POST
    PATH: ClassVar[str] = "/subaccounts/transfer"
    AUTH: ClassVar[bool] = True
    RESPONSE: ClassVar[Any] = TransferDetails

    coin: str
    size: Decimal
    source: Optional[str] = None
    destination: Optional[str] = None

    def validate(self) -> None:
        require(bool(self.coin), "TransferBetweenSubaccounts: coin must not be empty")
        require_positive("TransferBetweenSubaccounts", "size", self.size)
        require(self.source != self.destination,
                "TransferBetweenSubaccounts: source and destination must differ")

    def body(self) -> Dict[str, Any]:
        return {
            "coin": self.coin,
            "size": self.size,
            "source": self.source,
            "destination": self.destination,
        }
