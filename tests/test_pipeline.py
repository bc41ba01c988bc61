from __future__ import annotations

import asyncio
from typing import List

import httpx
import pytest

from websearch_mcp.crawl import Fetcher
from websearch_mcp.errors import SearchError
from websearch_mcp.pipeline import FailedSection, ScrapedSection, search_and_scrape
from websearch_mcp.search import SearchResult


LONG_BODY = "lorem ipsum " * 100


class FixedSearch:
    def __init__(self, results: List[SearchResult]):
        self.results = results
        self.calls = []

    async def search(self, query: str, count: int = 10, language: str = "zh-CN") -> List[SearchResult]:
        self.calls.append((query, count, language))
        return self.results


class BrokenSearch:
    async def search(self, query: str, count: int = 10, language: str = "zh-CN") -> List[SearchResult]:
        raise SearchError("provider unreachable")


def _results(n: int) -> List[SearchResult]:
    return [
        SearchResult(title=f"T{i}", url=f"https://site{i}.example/", snippet=f"s{i}", rank=i)
        for i in range(1, n + 1)
    ]


def _handler(order: list):
    def handler(request: httpx.Request) -> httpx.Response:
        order.append(request.url.host)
        if request.url.host == "site2.example":
            raise httpx.ReadTimeout("timed out", request=request)
        return httpx.Response(200, html=f"<html><body><p>{LONG_BODY}</p></body></html>")

    return handler


async def _run(search, order: list, limit: int = 3):
    async with Fetcher(transport=httpx.MockTransport(_handler(order))) as fetcher:
        return await search_and_scrape("weather", limit, "en", search_client=search, fetcher=fetcher)


def test_second_result_times_out_but_report_is_complete():
    order: list = []
    report = asyncio.run(_run(FixedSearch(_results(3)), order))

    assert [s.result.rank for s in report.sections] == [1, 2, 3]
    assert isinstance(report.sections[0], ScrapedSection)
    assert isinstance(report.sections[1], FailedSection)
    assert isinstance(report.sections[2], ScrapedSection)
    assert "timed out" in report.sections[1].error
    for s in (report.sections[0], report.sections[2]):
        assert len(s.excerpt) <= 300 + len("...")
        assert s.excerpt.endswith("...")
        assert s.excerpt.startswith("lorem ipsum")
    assert len(report.failures) == 1


def test_items_are_fetched_sequentially_in_rank_order():
    shuffled = list(reversed(_results(3)))
    order: list = []
    report = asyncio.run(_run(FixedSearch(shuffled), order))
    assert order == ["site1.example", "site2.example", "site3.example"]
    assert [s.result.rank for s in report.sections] == [1, 2, 3]


def test_search_arguments_are_passed_through():
    search = FixedSearch(_results(1))
    asyncio.run(_run(search, [], limit=5))
    assert search.calls == [("weather", 5, "en")]


def test_search_failure_is_fatal():
    with pytest.raises(SearchError):
        asyncio.run(_run(BrokenSearch(), []))


def test_every_item_failing_still_returns_report():
    results = [SearchResult(title="T", url="https://site2.example/", snippet="s", rank=1)]
    report = asyncio.run(_run(FixedSearch(results), []))
    assert len(report.sections) == 1
    assert isinstance(report.sections[0], FailedSection)


def test_empty_search_yields_empty_report():
    report = asyncio.run(_run(FixedSearch([]), []))
    assert report.sections == []
    assert report.query == "weather"
