"""Credentials and HMAC-SHA256 request signing.

The signature covers ``timestamp + METHOD + path_and_query + body`` where
``path_and_query`` is everything after the host (``/api/orders?market=X``)
and ``body`` is the exact byte string sent on the wire.
"""
from __future__ import annotations

import hashlib
import hmac
import os
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import quote

from dotenv import load_dotenv

KEY_HEADER = "FTX-KEY"
SIGN_HEADER = "FTX-SIGN"
TS_HEADER = "FTX-TS"
SUBACCOUNT_HEADER = "FTX-SUBACCOUNT"


@dataclass(frozen=True, slots=True)
class Credentials:
    key: str
    secret: str = field(repr=False)
    subaccount: Optional[str] = None

    @classmethod
    def from_env(cls, prefix: str = "FTX") -> "Credentials":
        """Load credentials from ``<PREFIX>_API_KEY`` / ``_API_SECRET`` / ``_SUBACCOUNT``.

        A ``.env`` file in the working directory is read first.

        Raises:
            ValueError: If the key or secret is missing.
        """
        load_dotenv()
        key = os.environ.get(f"{prefix}_API_KEY", "")
        secret = os.environ.get(f"{prefix}_API_SECRET", "")
        if not key or not secret:
            raise ValueError(f"Missing {prefix}_API_KEY or {prefix}_API_SECRET in environment")
        subaccount = os.environ.get(f"{prefix}_SUBACCOUNT") or None
        return cls(key=key, secret=secret, subaccount=subaccount)


@dataclass(frozen=True, slots=True)
class Signature:
    timestamp: int  # ms epoch
    signature: str
    key: str
    subaccount: Optional[str] = None

    def headers(self) -> Dict[str, str]:
        h = {
            KEY_HEADER: self.key,
            SIGN_HEADER: self.signature,
            TS_HEADER: str(self.timestamp),
        }
        if self.subaccount is not None:
            h[SUBACCOUNT_HEADER] = _header_value(self.subaccount)
        return h


def _header_value(value: str) -> str:
    # Printable ASCII goes through untouched; anything else cannot live in a header.
    if value.isascii() and value.isprintable():
        return value
    return quote(value, safe="")


def signature_payload(method: str, path_and_query: str, body: Optional[bytes],
                      timestamp_ms: int) -> bytes:
    prefix = f"{timestamp_ms}{method.upper()}{path_and_query}".encode("utf-8")
    return prefix + (body or b"")


def sign(credentials: Credentials, method: str, path_and_query: str,
         body: Optional[bytes], timestamp_ms: int) -> Signature:
    digest = hmac.new(
        credentials.secret.encode("utf-8"),
        signature_payload(method, path_and_query, body, timestamp_ms),
        hashlib.sha256,
    ).hexdigest()
    return Signature(
        timestamp=timestamp_ms,
        signature=digest,
        key=credentials.key,
        subaccount=credentials.subaccount,
    )
