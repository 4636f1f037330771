"""Response wrapper and envelope decoding.

Every exchange payload is wrapped as ``{"success": true, "result": ...}`` or
``{"success": false, "error": "..."}``. The wrapper keeps the raw bytes and
decodes on demand; decoding is pure and can be repeated.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Optional, TypeVar

import msgspec
import orjson

from ftx_rest.errors import DecodeError, ExchangeError

T = TypeVar("T")


class Envelope(msgspec.Struct):
    success: bool
    error: Optional[str] = None


class _Result(msgspec.Struct, Generic[T]):
    result: T


@lru_cache(maxsize=256)
def _decoder(response_type: Any) -> msgspec.json.Decoder:
    return msgspec.json.Decoder(_Result[response_type])


_ENVELOPE_DECODER = msgspec.json.Decoder(Envelope)


@dataclass(frozen=True, slots=True)
class Response(Generic[T]):
    status_code: int
    raw_body: bytes
    response_type: Any = Any

    @property
    def is_rate_limited(self) -> bool:
        return self.status_code == 429

    def envelope(self) -> Envelope:
        """Decode only the ``success`` / ``error`` part of the body."""
        try:
            return _ENVELOPE_DECODER.decode(self.raw_body)
        except (msgspec.DecodeError, msgspec.ValidationError) as exc:
            raise DecodeError(f"malformed response envelope: {exc}",
                              body=self.raw_body) from exc

    def _check_success(self) -> None:
        env = self.envelope()
        if not env.success:
            raise ExchangeError(env.error or "", status_code=self.status_code)

    def deserialize(self, response_type: Any = None) -> T:
        """Return the typed ``result``.

        Raises:
            ExchangeError: The envelope reports ``success: false``.
            DecodeError: The body is not an envelope, or ``result`` is missing
                or does not match the expected type.
        """
        self._check_success()
        target = self.response_type if response_type is None else response_type
        try:
            return _decoder(target).decode(self.raw_body).result
        except (msgspec.DecodeError, msgspec.ValidationError) as exc:
            raise DecodeError(f"failed to decode result as {target!r}: {exc}",
                              body=self.raw_body) from exc

    def deserialize_partial(self) -> Any:
        """Return the ``result`` as plain JSON values, without type checks."""
        self._check_success()
        data = orjson.loads(self.raw_body)
        if "result" not in data:
            raise DecodeError("response envelope has no result", body=self.raw_body)
        return data["result"]
