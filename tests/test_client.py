"""Tests for the HTTP client against a mocked transport."""
from __future__ import annotations
from typing import List

import httpx
import pytest

from aocsolver.client import AocClient
from aocsolver.errors import AocClientError, SessionIdError


def _mock_transport(seen: List[httpx.Request]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.method == "GET" and request.url.path == "/2024/day/1/input":
            return httpx.Response(200, text="3   4\n4   3\n")
        return httpx.Response(404, text="Please don't repeatedly request this endpoint")

    return httpx.MockTransport(handler)


async def _collect(client: AocClient, year: int, day: int) -> bytes:
    chunks = []
    async for chunk in client.get_input(year, day):
        chunks.append(chunk)
    return b"".join(chunks)


def test_input_url_joins_base_path():
    client = AocClient("https://example.com/aoc", "abc")
    assert str(client.input_url(2023, 7)) == "https://example.com/aoc/2023/day/7/input"


def test_rejects_base_url_without_host():
    with pytest.raises(ValueError):
        AocClient("/relative/path", "abc")


@pytest.mark.parametrize("session_id", ["", "   ", "abc;def", "abc\ndef", "sésame"])
def test_rejects_invalid_session_id(session_id):
    with pytest.raises(SessionIdError):
        AocClient("https://adventofcode.com/", session_id)


@pytest.mark.asyncio
async def test_get_input_sends_session_cookie():
    seen: List[httpx.Request] = []
    async with httpx.AsyncClient(transport=_mock_transport(seen)) as http:
        client = AocClient("https://adventofcode.com/", " abc123 ", client=http)
        body = await _collect(client, 2024, 1)

    assert body == b"3   4\n4   3\n"
    assert len(seen) == 1
    assert seen[0].headers["Cookie"] == "session=abc123"
    assert seen[0].headers["User-Agent"].startswith("aocsolver/")


@pytest.mark.asyncio
async def test_get_input_error_status():
    seen: List[httpx.Request] = []
    async with httpx.AsyncClient(transport=_mock_transport(seen)) as http:
        client = AocClient("https://adventofcode.com/", "abc123", client=http)
        with pytest.raises(AocClientError) as excinfo:
            await _collect(client, 2024, 26)

    assert excinfo.value.status_code == 404
    assert "repeatedly" in excinfo.value.details


@pytest.mark.asyncio
async def test_get_input_transport_failure():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
        client = AocClient("https://adventofcode.com/", "abc123", client=http)
        with pytest.raises(AocClientError) as excinfo:
            await _collect(client, 2024, 1)

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)
