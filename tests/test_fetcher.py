from __future__ import annotations

import asyncio

import httpx
import pytest

from websearch_mcp.crawl import Fetcher
from websearch_mcp.errors import FetchError


async def _fetch(handler, url: str, **kw):
    async with Fetcher(transport=httpx.MockTransport(handler), **kw) as fetcher:
        return await fetcher.fetch(url)


def test_fetch_sends_user_agent_and_returns_html():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, html="<title>ok</title>")

    page = asyncio.run(_fetch(handler, "https://example.org/", user_agent="TestBrowser/1.0"))
    assert seen["ua"] == "TestBrowser/1.0"
    assert page.status == 200
    assert "<title>ok</title>" in page.html
    assert page.content_type.startswith("text/html")


def test_fetch_default_user_agent_looks_like_a_browser():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, text="")

    asyncio.run(_fetch(handler, "https://example.org/"))
    assert seen["ua"].startswith("Mozilla/5.0")


def test_fetch_non_success_status_raises():
    with pytest.raises(FetchError, match="HTTP 404"):
        asyncio.run(_fetch(lambda req: httpx.Response(404), "https://example.org/missing"))


def test_fetch_timeout_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectTimeout("slow", request=request)

    with pytest.raises(FetchError, match="timed out") as info:
        asyncio.run(_fetch(handler, "https://slow.example/"))
    assert info.value.url == "https://slow.example/"


def test_fetch_rejects_relative_url():
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200)

    with pytest.raises(FetchError):
        asyncio.run(_fetch(handler, "/relative/path"))
    assert calls == []
