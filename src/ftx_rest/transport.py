"""HTTP transport used by the executor.

The executor only needs ``send(method, url, headers, body) -> (status, body)``.
:class:`AiohttpTransport` is the default; tests plug in their own.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional, Protocol, Tuple

import aiohttp
from yarl import URL

from ftx_rest.errors import RequestTimeout, TransportError

log = logging.getLogger(__name__)


class Transport(Protocol):
    async def send(self, method: str, url: str, headers: Dict[str, str],
                   body: Optional[bytes]) -> Tuple[int, bytes]: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """Transport backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None):
        self._session = session

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession()
        return self._session

    async def close(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def send(self, method: str, url: str, headers: Dict[str, str],
                   body: Optional[bytes]) -> Tuple[int, bytes]:
        session = await self._get_session()
        # The URL is already encoded; re-quoting would change the signed path.
        target = URL(url, encoded=True)
        try:
            async with session.request(method, target, headers=headers, data=body) as resp:
                payload = await resp.read()
                return resp.status, payload
        except asyncio.TimeoutError as exc:
            # aiohttp.ServerTimeoutError lands here too
            log.debug("REST %s %s timed out: %s", method, url, exc)
            raise RequestTimeout(str(exc) or "request timed out",
                                 method=method, path=url) from exc
        except aiohttp.ClientError as exc:
            log.debug("REST %s %s transport failure: %s", method, url, exc)
            raise TransportError(str(exc) or type(exc).__name__,
                                 method=method, path=url) from exc
