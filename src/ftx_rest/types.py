"""Shared enums and value types used across endpoint modules."""
from __future__ import annotations

from enum import Enum, IntEnum

import msgspec


class Method(str, Enum):
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    LIMIT = "limit"
    MARKET = "market"


class OrderStatus(str, Enum):
    NEW = "new"
    OPEN = "open"
    CLOSED = "closed"


class SortOrder(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class Resolution(IntEnum):
    """Candle window lengths accepted by the exchange, in seconds."""
    FIFTEEN_SECONDS = 15
    ONE_MINUTE = 60
    FIVE_MINUTES = 300
    FIFTEEN_MINUTES = 900
    ONE_HOUR = 3600
    FOUR_HOURS = 14400
    ONE_DAY = 86400


MAX_RESOLUTION_DAYS = 30
_FIXED_WINDOWS = frozenset(r.value for r in Resolution)


def is_valid_resolution(seconds: int) -> bool:
    """True for the fixed windows or a whole number of days up to 30."""
    if seconds in _FIXED_WINDOWS:
        return True
    days, rem = divmod(seconds, Resolution.ONE_DAY)
    return rem == 0 and 1 <= days <= MAX_RESOLUTION_DAYS


def qbool(value: bool) -> str:
    """Render a boolean the way the exchange expects in query strings."""
    return "true" if value else "false"


class Model(msgspec.Struct, rename="camel", kw_only=True, frozen=True):
    """Base for exchange payloads: camelCase on the wire, unknown fields ignored.

    msgspec applies ``kw_only`` per class, so subclasses must pass it again.
    Field names with digits need an explicit ``msgspec.field(name=...)``.
    """
