"""Tests for the asyncio client."""
from __future__ import annotations

import httpx
import pytest

from rest_parse import AsyncRestParse, ParseTransportError
from rest_parse.tests.conftest import APP_ID


class TestAsyncClient:
    @pytest.mark.asyncio
    async def test_returns_awaitable_result(self, async_parse, recorder):
        recorder.reply(200, json={"results": [{"objectId": "a"}]})
        error, response, body, success = await async_parse.objects("GameScore").get_all()
        assert error is None
        assert body == [{"objectId": "a"}]
        assert success is True
        assert recorder.last.headers["X-Parse-Application-Id"] == APP_ID

    @pytest.mark.asyncio
    async def test_merge_applies(self, async_parse, recorder):
        recorder.reply(201, json={"objectId": "u1"})
        result = await async_parse.users().sign_up({"username": "a"})
        assert result.body == {"username": "a", "objectId": "u1"}

    @pytest.mark.asyncio
    async def test_sync_callback(self, async_parse, recorder):
        seen = []
        await async_parse.push().send_notification(
            {"channels": [""]}, callback=lambda *args: seen.append(args)
        )
        assert len(seen) == 1 and seen[0][3] is True

    @pytest.mark.asyncio
    async def test_coroutine_callback_is_awaited(self, async_parse, recorder):
        seen = []

        async def on_done(error, response, body, success):
            seen.append(success)

        await async_parse.roles().get("r1", callback=on_done)
        assert seen == [True]

    @pytest.mark.asyncio
    async def test_transport_error(self):
        def boom(request):
            raise httpx.ReadTimeout("slow", request=request)

        async with AsyncRestParse(APP_ID, transport=httpx.MockTransport(boom)) as client:
            result = await client.users().get_current()
        assert isinstance(result.error, ParseTransportError)
        assert result.success is False

    @pytest.mark.asyncio
    async def test_count_body_kept(self, async_parse, recorder):
        recorder.reply(200, json={"results": [], "count": 3})
        result = await async_parse.objects("GameScore").count()
        assert result.body["count"] == 3
