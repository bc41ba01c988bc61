from __future__ import annotations

import asyncio

import httpx
import pytest

from websearch_mcp.api_config import ApiConfig
from websearch_mcp.errors import ConfigurationError, SearchError
from websearch_mcp.search import GoogleSearchClient, PlaceholderSearchClient, get_search_client
from websearch_mcp.settings import Settings


def _settings(**kw) -> Settings:
    base = {"search_api_key": None, "search_engine_id": None}
    base.update(kw)
    return Settings(_env_file=None, **base)


def test_placeholder_weather_two_results():
    results = asyncio.run(PlaceholderSearchClient().search("weather", count=2))
    assert [r.rank for r in results] == [1, 2]
    assert all("weather" in r.title for r in results)
    assert all(r.source == "placeholder" for r in results)


@pytest.mark.parametrize("limit,expected", [(1, 1), (3, 3), (10, 3)])
def test_placeholder_caps_at_three(limit, expected):
    results = asyncio.run(PlaceholderSearchClient().search("q", count=limit))
    assert len(results) == expected
    assert [r.rank for r in results] == list(range(1, expected + 1))


def test_placeholder_is_deterministic():
    a = asyncio.run(PlaceholderSearchClient().search("python"))
    b = asyncio.run(PlaceholderSearchClient().search("python"))
    assert a == b


def test_factory_selects_placeholder_without_credentials():
    client = get_search_client(_settings(search_api_key="k"), ApiConfig())
    assert isinstance(client, PlaceholderSearchClient)


def test_factory_uses_yaml_credentials():
    cfg = ApiConfig()
    cfg.google.api_key = "yaml-key"
    cfg.google.engine_id = "yaml-cx"
    client = get_search_client(_settings(), cfg)
    assert isinstance(client, GoogleSearchClient)
    asyncio.run(client.aclose())


def test_factory_rejects_unknown_provider():
    with pytest.raises(ConfigurationError):
        get_search_client(_settings(search_api_key="k", search_engine_id="cx", search_provider="bing"), ApiConfig())


def _google(handler) -> GoogleSearchClient:
    return GoogleSearchClient("key", "cx", request_timeout=1.0, transport=httpx.MockTransport(handler))


async def _search(client: GoogleSearchClient, *args, **kw):
    async with client:
        return await client.search(*args, **kw)


def test_google_maps_items_positionally():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen.update(request.url.params)
        return httpx.Response(200, json={"items": [
            {"title": "A", "link": "https://a.example", "snippet": "sa"},
            {"title": "B", "link": "https://b.example", "snippet": "sb"},
        ]})

    results = asyncio.run(_search(_google(handler), "rust", count=25, language="en"))
    assert [(r.rank, r.title, r.url, r.snippet) for r in results] == [
        (1, "A", "https://a.example", "sa"),
        (2, "B", "https://b.example", "sb"),
    ]
    assert seen["num"] == "10"
    assert seen["lr"] == "lang_en"
    assert seen["q"] == "rust"
    assert seen["cx"] == "cx"


def test_google_no_items_returns_empty():
    results = asyncio.run(_search(_google(lambda req: httpx.Response(200, json={})), "nothing"))
    assert results == []


def test_google_http_error_raises_search_error():
    with pytest.raises(SearchError, match="403"):
        asyncio.run(_search(_google(lambda req: httpx.Response(403, json={"error": {}})), "q"))


def test_google_timeout_raises_search_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(SearchError):
        asyncio.run(_search(_google(handler), "q"))
