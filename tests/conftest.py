"""
Shared fixtures for fetch_layered tests.
"""
import asyncio
from typing import Any, Optional
from unittest.mock import AsyncMock

import pytest

from fetch_layered.config import GlobalSettings, reset_global_settings
from fetch_layered.core.client import FetchClient


user = {"fullName": "Reza Ghorbani", "age": 28}

users = [
    {"fullName": "John Doe", "age": 16},
    {"fullName": "Sarah Connor", "age": 36},
    {"fullName": "John Lennon", "age": 40},
]


class FakeResponse:
    """Minimal transport response."""

    def __init__(self, status: int = 200, status_text: str = "OK", payload: Any = None, json_error: bool = False):
        self.status = status
        self.status_text = status_text
        self.ok = 200 <= status < 300
        self._payload = payload
        self._json_error = json_error

    async def json(self) -> Any:
        if self._json_error:
            raise ValueError("Unexpected end of JSON input")
        return self._payload


def make_transport(response: Optional[FakeResponse] = None, delay: float = 0.0) -> AsyncMock:
    """Transport mock whose send() returns ``response`` after ``delay`` seconds."""
    response = response if response is not None else FakeResponse(payload=users)

    async def send(url, request):
        if delay:
            await asyncio.sleep(delay)
        return response

    transport = AsyncMock()
    transport.send = AsyncMock(side_effect=send)
    return transport


@pytest.fixture(autouse=True)
def _reset_process_settings():
    reset_global_settings()
    yield
    reset_global_settings()


@pytest.fixture
def global_settings():
    """Fresh shared settings per test."""
    return GlobalSettings()


@pytest.fixture
def users_transport():
    return make_transport(FakeResponse(payload=users))


@pytest.fixture
def client(global_settings, users_transport):
    return FetchClient(global_settings=global_settings, transport=users_transport)


def sent(transport: AsyncMock, index: int = 0):
    """Return (url, request) of a recorded send() call."""
    args = transport.send.call_args_list[index].args
    return args[0], args[1]
