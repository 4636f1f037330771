"""Turns a descriptor into one signed HTTP call and wraps the reply.

``prepare`` is pure: it resolves method, path and query, and serializes the
body once. Those body bytes are both signed and transmitted, so they are never
re-encoded after signing.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, TypeVar

from ftx_rest.auth import Credentials, sign
from ftx_rest.config import ClientConfig
from ftx_rest.errors import AuthRequiredError, RequestTimeout
from ftx_rest.request import Request
from ftx_rest.response import Response
from ftx_rest.transport import Transport
from ftx_rest.utils import time_now_ms

log = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class PreparedRequest:
    method: str
    path: str  # api prefix + endpoint path + query, exactly as sent
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ClientState:
    """Read-only state shared by every call made through one client."""
    config: ClientConfig
    transport: Transport
    credentials: Optional[Credentials] = None
    clock: Callable[[], int] = time_now_ms


def prepare(request: Request, api_prefix: str = "") -> PreparedRequest:
    body = request.body_bytes()
    headers: Dict[str, str] = {}
    if body is not None:
        headers["Content-Type"] = "application/json"
    return PreparedRequest(
        method=request.METHOD.value,
        path=f"{api_prefix}{request.path_and_query()}",
        body=body,
        headers=headers,
    )


def authenticate(prepared: PreparedRequest, credentials: Credentials,
                 timestamp_ms: int) -> PreparedRequest:
    signature = sign(credentials, prepared.method, prepared.path,
                     prepared.body, timestamp_ms)
    return PreparedRequest(
        method=prepared.method,
        path=prepared.path,
        body=prepared.body,
        headers={**prepared.headers, **signature.headers()},
    )


async def execute(state: ClientState, request: Request[T],
                  timeout: Optional[float] = None) -> Response[T]:
    """Send one request. No retries; status codes are passed through.

    Raises:
        AuthRequiredError: ``request.AUTH`` is set and the client has no
            credentials. Nothing is sent.
        RequestTimeout: The network wait exceeded ``timeout``.
        TransportError: The transport failed.
    """
    prepared = prepare(request, state.config.api_prefix)

    if request.AUTH:
        if state.credentials is None:
            raise AuthRequiredError(
                f"{type(request).__name__} requires credentials; "
                "construct the Client with Credentials")
        prepared = authenticate(prepared, state.credentials, state.clock())

    if timeout is None:
        timeout = state.config.timeout

    url = f"{state.config.base_url}{prepared.path}"
    log.debug("REST %s %s", prepared.method, prepared.path)

    send = state.transport.send(prepared.method, url, prepared.headers, prepared.body)
    try:
        if timeout is None:
            status, body = await send
        else:
            status, body = await asyncio.wait_for(send, timeout)
    except asyncio.TimeoutError as exc:
        limit = "" if timeout is None else f" after {timeout}s"
        raise RequestTimeout(
            f"{prepared.method} {prepared.path} timed out{limit}",
            method=prepared.method, path=prepared.path,
        ) from exc

    log.debug("REST %s %s -> %d (%d bytes)", prepared.method, prepared.path,
              status, len(body))
    return Response(status_code=status, raw_body=body, response_type=request.RESPONSE)
