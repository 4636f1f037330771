"""Typed async client for the FTX REST API.

Re-exports the client surface so consumers can write::

    from ftx_rest import Client, Credentials
    from ftx_rest.endpoints import GetMarket
"""
from ftx_rest.auth import Credentials, Signature, sign
from ftx_rest.client import Client
from ftx_rest.config import ClientConfig
from ftx_rest.errors import (
    AuthRequiredError,
    ConstructionError,
    DecodeError,
    ExchangeError,
    FtxError,
    RequestTimeout,
    TransportError,
)
from ftx_rest.request import Request
from ftx_rest.response import Response
from ftx_rest.transport import AiohttpTransport, Transport

__all__ = [
    "Client",
    "ClientConfig",
    "Credentials",
    "Signature",
    "sign",
    "Request",
    "Response",
    "Transport",
    "AiohttpTransport",
    "FtxError",
    "ConstructionError",
    "AuthRequiredError",
    "TransportError",
    "RequestTimeout",
    "ExchangeError",
    "DecodeError",
]
