from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Union

from ..crawl import Fetcher
from ..extract import excerpt, extract_page
from ..search.base import SearchClient, SearchResult


log = logging.getLogger(__name__)

PIPELINE_EXCERPT_CHARS = 300


@dataclass(frozen=True)
class ScrapedSection:
    result: SearchResult
    excerpt: str


@dataclass(frozen=True)
class FailedSection:
    result: SearchResult
    error: str


Section = Union[ScrapedSection, FailedSection]


@dataclass
class PipelineReport:
    query: str
    sections: List[Section] = field(default_factory=list)

    @property
    def failures(self) -> List[FailedSection]:
        return [s for s in self.sections if isinstance(s, FailedSection)]


async def scrape_result(result: SearchResult, fetcher: Fetcher) -> Section:
    """Fetch and extract one search hit; never raises."""
    try:
        page = await fetcher.fetch(result.url)
        content = extract_page(page.html, result.url, want_text=True, want_metadata=False)
    except Exception as e:
        log.warning("scrape of rank %d failed: %s", result.rank, e)
        return FailedSection(result=result, error=str(e) or type(e).__name__)
    log.debug("scraped rank %d: %d chars", result.rank, len(content.text))
    return ScrapedSection(result=result, excerpt=excerpt(content.text, PIPELINE_EXCERPT_CHARS))


async def search_and_scrape(
    query: str,
    limit: int = 3,
    language: str = "zh-CN",
    *,
    search_client: SearchClient,
    fetcher: Fetcher,
) -> PipelineReport:
    # Search failures propagate: no partial report without a result list
    results = await search_client.search(query, count=limit, language=language)
    report = PipelineReport(query=query)
    # One page at a time, in rank order
    for result in sorted(results, key=lambda r: r.rank):
        report.sections.append(await scrape_result(result, fetcher))
    log.info(
        "search_and_scrape %r: %d sections, %d failed",
        query,
        len(report.sections),
        len(report.failures),
    )
    return report
