import time
from decimal import Decimal
from typing import Any

import orjson


def time_now_ms() -> int:
    return int(time.time() * 1000)


def json_default(obj: Any) -> Any:
    """orjson fallback for types it does not serialize natively.

    Decimals are written as their exact digits, never through float.
    """
    if isinstance(obj, Decimal):
        if not obj.is_finite():
            raise TypeError(f"Non-finite Decimal is not valid JSON: {obj}")
        return orjson.Fragment(str(obj))
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")
