"""
rest_parse test configuration.

No test touches the network: every client is wired to an httpx.MockTransport
that records requests and answers from a queue of canned responses.
"""
from __future__ import annotations

import json

import httpx
import pytest
import pytest_asyncio

APP_ID = "test-app-id"
REST_KEY = "test-rest-key"
BASE_URL = "https://api.parse.com/1"


class Recorder:
    """Mock transport handler: records requests, replays queued responses."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, **kwargs) -> Recorder:
        self.responses.append(httpx.Response(status_code, **kwargs))
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.responses:
            return self.responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def reset_settings():
    from rest_parse.core.config import _reset_settings
    _reset_settings()
    yield
    _reset_settings()


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def parse(recorder):
    from rest_parse import RestParse
    client = RestParse(
        APP_ID,
        rest_api_key=REST_KEY,
        base_url=BASE_URL,
        transport=httpx.MockTransport(recorder),
    )
    yield client
    client.close()


@pytest_asyncio.fixture
async def async_parse(recorder):
    from rest_parse import AsyncRestParse
    client = AsyncRestParse(
        APP_ID,
        rest_api_key=REST_KEY,
        base_url=BASE_URL,
        transport=httpx.MockTransport(recorder),
    )
    yield client
    await client.aclose()
