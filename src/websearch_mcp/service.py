from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import httpx

from .api_config import ApiConfig, load_api_config
from .crawl import Fetcher
from .errors import InvalidArgumentError, UnknownToolError, WebSearchError
from .extract import extract_page
from .pipeline import search_and_scrape
from .report import format_page, format_pipeline_report, format_search_results
from .search import get_search_client
from .settings import Settings


log = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "zh-CN"
PIPELINE_DEFAULT_RESULTS = 3

TOOL_SPECS: List[Dict[str, Any]] = [
    {
        "name": "web_search",
        "description": "Search the web and return matching page links with summaries.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "maxResults": {
                    "type": "integer",
                    "description": "Maximum number of results (default 10)",
                    "default": 10,
                },
                "language": {
                    "type": "string",
                    "description": "Search language, e.g. zh-CN, en-US",
                    "default": DEFAULT_LANGUAGE,
                },
            },
            "required": ["query"],
        },
    },
    {
        "name": "web_scrape",
        "description": "Fetch a web page and extract its text and metadata.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "url": {"type": "string", "description": "URL of the page to scrape"},
                "extractText": {
                    "type": "boolean",
                    "description": "Extract plain text content (default true)",
                    "default": True,
                },
                "extractMetadata": {
                    "type": "boolean",
                    "description": "Extract page metadata (default true)",
                    "default": True,
                },
            },
            "required": ["url"],
        },
    },
    {
        "name": "web_search_and_scrape",
        "description": "Search the web and scrape the content of the top results.",
        "inputSchema": {
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "Search query"},
                "maxResults": {
                    "type": "integer",
                    "description": "Maximum number of results to scrape (default 3)",
                    "default": PIPELINE_DEFAULT_RESULTS,
                },
                "language": {
                    "type": "string",
                    "description": "Search language, e.g. zh-CN, en-US",
                    "default": DEFAULT_LANGUAGE,
                },
            },
            "required": ["query"],
        },
    },
]


@dataclass
class ToolResponse:
    text: str
    is_error: bool = False

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"content": [{"type": "text", "text": self.text}]}
        if self.is_error:
            out["isError"] = True
        return out


def _require_text(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidArgumentError(f"'{name}' must be a non-empty string")
    return value


def _as_count(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgumentError(f"'{name}' must be an integer")
    try:
        n = int(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"'{name}' must be an integer") from e
    if n < 1:
        raise InvalidArgumentError(f"'{name}' must be at least 1")
    return n


def _as_flag(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"'{name}' must be a boolean")
    return value


class WebSearchService:
    """The three web tools, independent of the transport that exposes them.

    Each call opens its own search client and fetcher; the only state shared
    between calls is the read-only configuration.
    """

    def __init__(
        self,
        settings: Settings,
        api_config: ApiConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings
        self.api_config = api_config or load_api_config(settings.api_config_path)
        self._transport = transport

    def _fetcher(self) -> Fetcher:
        return Fetcher(
            user_agent=self.settings.user_agent,
            request_timeout=self.settings.timeout_seconds,
            transport=self._transport,
        )

    async def web_search(
        self,
        query: str,
        max_results: Optional[int] = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> str:
        query = _require_text(query, "query")
        limit = _as_count(self.settings.max_results if max_results is None else max_results, "maxResults")
        try:
            async with get_search_client(self.settings, self.api_config, self._transport) as client:
                results = await client.search(query, count=limit, language=language)
        except WebSearchError as e:
            raise WebSearchError(f"Search failed: {e}") from e
        return format_search_results(query, results[:limit])

    async def web_scrape(self, url: str, extract_text: bool = True, extract_metadata: bool = True) -> str:
        url = _require_text(url, "url")
        try:
            async with self._fetcher() as fetcher:
                page = await fetcher.fetch(url)
        except WebSearchError as e:
            raise WebSearchError(f"Scrape failed: {e}") from e
        content = extract_page(page.html, url, want_text=extract_text, want_metadata=extract_metadata)
        return format_page(content, include_text=extract_text, include_metadata=extract_metadata)

    async def web_search_and_scrape(
        self,
        query: str,
        max_results: int = PIPELINE_DEFAULT_RESULTS,
        language: str = DEFAULT_LANGUAGE,
    ) -> str:
        query = _require_text(query, "query")
        limit = _as_count(max_results, "maxResults")
        try:
            async with get_search_client(self.settings, self.api_config, self._transport) as client:
                async with self._fetcher() as fetcher:
                    report = await search_and_scrape(
                        query, limit, language, search_client=client, fetcher=fetcher
                    )
        except WebSearchError as e:
            raise WebSearchError(f"Search and scrape failed: {e}") from e
        return format_pipeline_report(report)

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
        """Dispatch a tool call by protocol name; failures become error responses."""
        args = dict(arguments or {})
        try:
            if name == "web_search":
                text = await self.web_search(
                    args.get("query"),
                    max_results=args.get("maxResults"),
                    language=args.get("language") or DEFAULT_LANGUAGE,
                )
            elif name == "web_scrape":
                text = await self.web_scrape(
                    args.get("url"),
                    extract_text=_as_flag(args.get("extractText", True), "extractText"),
                    extract_metadata=_as_flag(args.get("extractMetadata", True), "extractMetadata"),
                )
            elif name == "web_search_and_scrape":
                text = await self.web_search_and_scrape(
                    args.get("query"),
                    max_results=args.get("maxResults", PIPELINE_DEFAULT_RESULTS),
                    language=args.get("language") or DEFAULT_LANGUAGE,
                )
            else:
                raise UnknownToolError(name)
        except WebSearchError as e:
            log.info("tool %s failed: %s", name, e)
            return ToolResponse(text=f"Error: {e}", is_error=True)
        except Exception as e:
            log.exception("tool %s raised unexpectedly", name)
            return ToolResponse(text=f"Error: {e}", is_error=True)
        return ToolResponse(text=text)
