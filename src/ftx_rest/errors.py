"""Exception hierarchy for the FTX REST client.

Every failure is raised to the caller as one of these types. The client never
retries and never falls back silently, so callers can apply their own policy.
"""
from __future__ import annotations

from typing import Optional


class FtxError(Exception):
    """Base exception for all client errors."""


class ConstructionError(FtxError, ValueError):
    """Descriptor built with missing or invalid parameters.

    Raised before any network call is attempted.
    """


class AuthRequiredError(FtxError):
    """Private endpoint executed on a client without credentials."""


class TransportError(FtxError):
    """Network, TLS or connection failure while talking to the exchange."""

    def __init__(self, message: str, *, method: str = "", path: str = ""):
        super().__init__(message)
        self.method = method
        self.path = path


class RequestTimeout(TransportError):
    """The network wait exceeded the requested timeout."""


class ExchangeError(FtxError):
    """The exchange answered with ``{"success": false, "error": ...}``."""

    def __init__(self, message: str, *, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DecodeError(FtxError):
    """Response body is not a well-formed envelope for the expected type."""

    def __init__(self, message: str, *, body: bytes = b""):
        super().__init__(message)
        self.body = body
