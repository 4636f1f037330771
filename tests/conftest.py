"""Shared test fixtures."""
import asyncio
import itertools
import os
import sys

import pytest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ftx_rest.auth import Credentials  # noqa: E402


class FakeTransport:
    """Records every send and replies with a canned status/body."""

    def __init__(self, status=200, body=b'{"success":true,"result":null}', delay=0.0,
                 error=None):
        self.status = status
        self.body = body
        self.delay = delay
        self.error = error
        self.calls = []
        self.cancelled = False
        self.closed = False

    async def send(self, method, url, headers, body):
        self.calls.append({"method": method, "url": url,
                           "headers": dict(headers), "body": body})
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        if self.error is not None:
            raise self.error
        return self.status, self.body

    async def close(self):
        self.closed = True


@pytest.fixture
def credentials():
    return Credentials(key="test-key", secret="test-secret")


@pytest.fixture
def sub_credentials():
    return Credentials(key="test-key", secret="test-secret", subaccount="Battle Royale")


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def counting_clock():
    counter = itertools.count(1_600_000_000_000)
    return lambda: next(counter)
