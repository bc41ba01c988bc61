import logging
from typing import Annotated, Any, Dict

from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from pydantic import Field

from .search import search_credentials
from .service import DEFAULT_LANGUAGE, PIPELINE_DEFAULT_RESULTS, TOOL_SPECS, WebSearchService
from .settings import Settings


log = logging.getLogger(__name__)

SERVER_NAME = "web-search-mcp"

_DESCRIPTIONS = {spec["name"]: spec["description"] for spec in TOOL_SPECS}


def build_server(service: WebSearchService) -> FastMCP:
    """Register the web tools on a FastMCP server.

    Parameter names follow the wire schema (camelCase), so agents written
    against the tool list can call them unchanged. Failed calls raise
    ToolError, which FastMCP reports as a result with ``isError`` set.
    """
    mcp = FastMCP(SERVER_NAME)

    async def _dispatch(name: str, arguments: Dict[str, Any]) -> str:
        resp = await service.call_tool(name, arguments)
        if resp.is_error:
            raise ToolError(resp.text)
        return resp.text

    @mcp.tool(name="web_search", description=_DESCRIPTIONS["web_search"])
    async def web_search(
        query: Annotated[str, Field(description="Search query")],
        maxResults: Annotated[int, Field(description="Maximum number of results", ge=1)] = service.settings.max_results,  # noqa: N803
        language: Annotated[str, Field(description="Search language, e.g. zh-CN, en-US")] = DEFAULT_LANGUAGE,
    ) -> str:
        return await _dispatch("web_search", {"query": query, "maxResults": maxResults, "language": language})

    @mcp.tool(name="web_scrape", description=_DESCRIPTIONS["web_scrape"])
    async def web_scrape(
        url: Annotated[str, Field(description="URL of the page to scrape")],
        extractText: Annotated[bool, Field(description="Extract plain text content")] = True,  # noqa: N803
        extractMetadata: Annotated[bool, Field(description="Extract page metadata")] = True,  # noqa: N803
    ) -> str:
        return await _dispatch(
            "web_scrape", {"url": url, "extractText": extractText, "extractMetadata": extractMetadata}
        )

    @mcp.tool(name="web_search_and_scrape", description=_DESCRIPTIONS["web_search_and_scrape"])
    async def web_search_and_scrape(
        query: Annotated[str, Field(description="Search query")],
        maxResults: Annotated[int, Field(description="Maximum number of results to scrape", ge=1)] = PIPELINE_DEFAULT_RESULTS,  # noqa: N803
        language: Annotated[str, Field(description="Search language, e.g. zh-CN, en-US")] = DEFAULT_LANGUAGE,
    ) -> str:
        return await _dispatch(
            "web_search_and_scrape", {"query": query, "maxResults": maxResults, "language": language}
        )

    return mcp


def run_stdio(settings: Settings) -> None:
    service = WebSearchService(settings)
    mcp = build_server(service)
    api_key, engine_id = search_credentials(settings, service.api_config)
    mode = settings.search_provider if api_key and engine_id else "placeholder"
    log.info("%s started on stdio (search: %s)", SERVER_NAME, mode)
    mcp.run(transport="stdio")
