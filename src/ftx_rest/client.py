"""Client façade: the single entry point for executing endpoint descriptors."""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from ftx_rest.auth import Credentials
from ftx_rest.config import ClientConfig
from ftx_rest.executor import ClientState, execute
from ftx_rest.request import Request
from ftx_rest.response import Response
from ftx_rest.transport import AiohttpTransport, Transport
from ftx_rest.utils import time_now_ms

T = TypeVar("T")


class Client:
    """Async FTX REST client.

    Without credentials only public endpoints can be executed; private ones
    raise :class:`~ftx_rest.errors.AuthRequiredError` before any I/O.

    Usage::

        async with Client() as client:
            resp = await client.execute(GetMarket(market="BTC-PERP"), timeout=10)
            market = resp.deserialize()
    """

    def __init__(
        self,
        credentials: Optional[Credentials] = None,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[Transport] = None,
        clock: Optional[Callable[[], int]] = None,
    ):
        self._state = ClientState(
            config=config or ClientConfig(),
            transport=transport or AiohttpTransport(),
            credentials=credentials,
            clock=clock or time_now_ms,
        )

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._state.credentials

    @property
    def config(self) -> ClientConfig:
        return self._state.config

    @property
    def is_authenticated(self) -> bool:
        return self._state.credentials is not None

    async def execute(self, request: Request[T],
                      timeout: Optional[float] = None) -> Response[T]:
        return await execute(self._state, request, timeout)

    async def close(self) -> None:
        await self._state.transport.close()

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *exc) -> None:
        await self.close()
