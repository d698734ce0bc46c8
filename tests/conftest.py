"""Pytest configuration and fixtures: a fake aiohttp session that
records every request instead of touching the network."""
import json as jsonlib
from typing import Any, List, NamedTuple, Optional

import aiohttp
import pytest

from qgapi import Api, RESTClient

HOST = "https://api.example.com"
TOKEN = "Bot 1.secret"


class Call(NamedTuple):
    method: str
    url: str
    kwargs: dict


class FakeResponse:
    def __init__(
        self,
        status: int = 200,
        body: Any = None,
        *,
        text: Optional[str] = None,
        content_type: str = "application/json",
    ):
        self.status = status
        if text is None:
            text = "" if body is None else jsonlib.dumps(body)
        self._text = text
        self.headers = {"Content-Type": content_type}
        self.request_info = object()

    async def text(self, encoding: str = "utf-8") -> str:
        return self._text

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FailingResponse:
    def __init__(self, exc: BaseException):
        self.exc = exc

    async def __aenter__(self):
        raise self.exc

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeSession:
    """Stands in for `aiohttp.ClientSession`, answers with queued
    responses (or an empty 200) and records every call."""

    def __init__(self):
        self.calls: List[Call] = []
        self.responses: List[Any] = []

    def respond(self, status: int = 200, body: Any = None, **kwargs: Any) -> None:
        self.responses.append(FakeResponse(status, body, **kwargs))

    def fail(self, exc: BaseException) -> None:
        self.responses.append(FailingResponse(exc))

    def request(self, method: str, url: str, **kwargs: Any):
        self.calls.append(Call(method, url, kwargs))
        if self.responses:
            return self.responses.pop(0)
        return FakeResponse(200, {})


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return RESTClient(session=session, token=TOKEN, host=HOST)


@pytest.fixture
def api(client):
    return Api(client)


@pytest.fixture
def connection_error():
    return aiohttp.ClientConnectionError("connection refused")
