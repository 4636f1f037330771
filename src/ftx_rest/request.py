"""The contract every endpoint descriptor implements.

A descriptor is a frozen dataclass deriving from :class:`Request`. The class
declares the HTTP method, a path template, whether the call is signed, and the
type of the envelope's ``result``; the instance carries the call's values::

    @dataclass(frozen=True, slots=True)
    class GetMarket(Request[Market]):
        METHOD: ClassVar[Method] = Method.GET
        PATH: ClassVar[str] = "/markets/{market}"
        RESPONSE: ClassVar[Any] = Market

        market: str

Placeholders in ``PATH`` are resolved when the descriptor is constructed, so a
descriptor with a missing path parameter never reaches the executor.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation
from string import Formatter
from typing import Any, ClassVar, Dict, FrozenSet, Generic, List, Optional, Tuple, TypeVar
from urllib.parse import quote, urlencode

import orjson

from ftx_rest.errors import ConstructionError
from ftx_rest.types import Method
from ftx_rest.utils import json_default

T = TypeVar("T")

QueryParams = List[Tuple[str, str]]


def path_placeholders(template: str) -> List[str]:
    return [name for _, name, _, _ in Formatter().parse(template) if name]


def valid_segment(value: str, multi: bool = False) -> bool:
    """False for values that would add, drop or climb path segments."""
    parts = value.split("/") if multi else [value]
    return all(part not in ("", ".", "..") for part in parts)


def encode_query(params: QueryParams) -> str:
    """Encode query pairs in the given order. The result is signed as-is."""
    return urlencode(params)


class Request(Generic[T]):
    """Base for endpoint descriptors."""

    __slots__ = ()

    METHOD: ClassVar[Method] = Method.GET
    PATH: ClassVar[str] = "/"
    AUTH: ClassVar[bool] = False
    RESPONSE: ClassVar[Any] = Any
    # placeholders whose values may span several path segments
    MULTI_SEGMENT: ClassVar[FrozenSet[str]] = frozenset()

    def __post_init__(self) -> None:
        self.validate()
        self.path()

    # --- Hooks for subclasses ---

    def validate(self) -> None:
        """Check field constraints; raise ConstructionError on bad input."""

    def path_params(self) -> Dict[str, Any]:
        return {name: getattr(self, name, None) for name in path_placeholders(self.PATH)}

    def query_params(self) -> QueryParams:
        return []

    def body(self) -> Optional[Dict[str, Any]]:
        return None

    # --- Derived request parts ---

    def path(self) -> str:
        """Substitute path parameters, percent-encoding each value.

        Only placeholders named in ``MULTI_SEGMENT`` keep ``/`` unescaped, so
        spot markets such as ``BTC/USD`` route correctly. Empty, ``.`` and
        ``..`` segments are refused.
        """
        params = self.path_params()
        encoded = {}
        for name in path_placeholders(self.PATH):
            value = params.get(name)
            if value is None or value == "":
                raise ConstructionError(
                    f"{type(self).__name__}: missing path parameter {name!r}")
            text = str(value)
            multi = name in self.MULTI_SEGMENT
            if not valid_segment(text, multi):
                raise ConstructionError(
                    f"{type(self).__name__}: invalid path parameter {name}={text!r}")
            encoded[name] = quote(text, safe="/" if multi else "")
        return self.PATH.format(**encoded)

    def query_string(self) -> str:
        return encode_query(self.query_params())

    def path_and_query(self) -> str:
        query = self.query_string()
        return f"{self.path()}?{query}" if query else self.path()

    def body_bytes(self) -> Optional[bytes]:
        payload = self.body()
        if payload is None:
            return None
        return orjson.dumps(payload, default=json_default)


def optional_params(*pairs: Tuple[str, Optional[str]]) -> QueryParams:
    """Build query pairs, dropping those whose value is None."""
    return [(k, v) for k, v in pairs if v is not None]


def optional_fields(**fields: Any) -> Dict[str, Any]:
    """Build a body dict, dropping None values."""
    return {k: v for k, v in fields.items() if v is not None}


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ConstructionError(message)


def require_positive(name: str, field_name: str, value: Optional[Decimal]) -> None:
    """Reject NaN, infinities, zero and negatives; None is allowed."""
    if value is None:
        return
    try:
        value = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise ConstructionError(f"{name}: {field_name} is not a number: {value!r}") from exc
    require(value.is_finite(), f"{name}: {field_name} must be finite, got {value}")
    require(value > 0, f"{name}: {field_name} must be positive, got {value}")


def time_window(start_time: Optional[int], end_time: Optional[int]) -> QueryParams:
    """``start_time`` / ``end_time`` query pairs, in seconds since the epoch."""
    return optional_params(
        ("start_time", None if start_time is None else str(start_time)),
        ("end_time", None if end_time is None else str(end_time)),
    )


def validate_window(name: str, start_time: Optional[int], end_time: Optional[int]) -> None:
    if start_time is not None and end_time is not None:
        require(start_time <= end_time, f"{name}: start_time must not be after end_time")
