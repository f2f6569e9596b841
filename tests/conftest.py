"""Pytest fixtures for Teamwork AI.

Teamwork.com is faked with ``httpx.MockTransport``: every request the engine
sends is recorded, and answers come from a queue of canned responses
(``200 {}`` once the queue is empty).
"""

import json
from typing import Any, List

import httpx
import pytest

from handlers import build_registry
from teamwork.engine import Engine

SERVER = "https://acme.teamwork.com"
TOKEN = "secret-token"


class FakeTeamwork:
    def __init__(self):
        self.requests: List[httpx.Request] = []
        self._responses: List[Any] = []

    def reply(self, status: int = 200, json_body: Any = None, text: str = None) -> None:
        if text is not None:
            self._responses.append(httpx.Response(status, text=text))
        else:
            self._responses.append(httpx.Response(status, json=json_body if json_body is not None else {}))

    def fail(self, error: Exception) -> None:
        self._responses.append(error)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            return httpx.Response(200, json={})
        answer = self._responses.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]


def body_of(request: httpx.Request) -> Any:
    return json.loads(request.content)


def query_of(request: httpx.Request) -> dict:
    return dict(request.url.params)


# --- Fixtures --------------------------------------------------------------

@pytest.fixture()
def teamwork() -> FakeTeamwork:
    return FakeTeamwork()


@pytest.fixture()
async def http_client(teamwork):
    client = httpx.AsyncClient(transport=httpx.MockTransport(teamwork.handler))
    try:
        yield client
    finally:
        await client.aclose()


@pytest.fixture()
def engine(http_client) -> Engine:
    return Engine(SERVER, TOKEN, http_client=http_client)


@pytest.fixture()
def registry(engine):
    return build_registry(engine)
