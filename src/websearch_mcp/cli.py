from __future__ import annotations

import argparse
import asyncio
import inspect
import json
import logging
import sys
from typing import Any, Dict

from .service import TOOL_SPECS, WebSearchService
from .settings import Settings, get_settings


def configure_logging(level: str) -> None:
    # stdout carries the MCP stdio stream; logs go to stderr
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


async def _call(settings: Settings, name: str, arguments: Dict[str, Any]) -> int:
    service = WebSearchService(settings)
    resp = await service.call_tool(name, arguments)
    print(resp.text, file=sys.stderr if resp.is_error else sys.stdout)
    return 1 if resp.is_error else 0


async def cmd_search(args: argparse.Namespace, settings: Settings) -> int:
    arguments: Dict[str, Any] = {"query": args.query, "language": args.language}
    if args.max_results is not None:
        arguments["maxResults"] = args.max_results
    return await _call(settings, "web_search", arguments)


async def cmd_scrape(args: argparse.Namespace, settings: Settings) -> int:
    return await _call(settings, "web_scrape", {
        "url": args.url,
        "extractText": not args.no_text,
        "extractMetadata": not args.no_metadata,
    })


async def cmd_search_scrape(args: argparse.Namespace, settings: Settings) -> int:
    return await _call(settings, "web_search_and_scrape", {
        "query": args.query,
        "maxResults": args.max_results,
        "language": args.language,
    })


async def cmd_tools(args: argparse.Namespace, settings: Settings) -> int:
    for spec in TOOL_SPECS:
        print(json.dumps(spec, ensure_ascii=False))
    return 0


def cmd_serve(args: argparse.Namespace, settings: Settings) -> int:
    # imported lazily so the one-shot commands do not need the MCP runtime loaded
    from .server import run_stdio

    run_stdio(settings)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="web-search-mcp", description="Web search / scrape MCP server and CLI")
    parser.add_argument("--log-level", help="Logging level override (default: LOG_LEVEL or INFO)")
    sub = parser.add_subparsers(dest="command")

    p_serve = sub.add_parser("serve", help="Run the MCP server on stdio (default)")
    p_serve.set_defaults(func=cmd_serve)

    p_tools = sub.add_parser("tools", help="Print the tool list as JSON lines")
    p_tools.set_defaults(func=cmd_tools)

    p_search = sub.add_parser("search", help="Run web_search and print the formatted result")
    p_search.add_argument("--query", required=True, help="Search query string")
    p_search.add_argument("--max-results", type=int, help="Number of results (default: MAX_RESULTS)")
    p_search.add_argument("--language", default="zh-CN", help="Search language, e.g. zh-CN, en-US")
    p_search.set_defaults(func=cmd_search)

    p_scrape = sub.add_parser("scrape", help="Run web_scrape on one URL")
    p_scrape.add_argument("--url", required=True, help="Page URL")
    p_scrape.add_argument("--no-text", action="store_true", help="Skip text extraction")
    p_scrape.add_argument("--no-metadata", action="store_true", help="Skip metadata extraction")
    p_scrape.set_defaults(func=cmd_scrape)

    p_ss = sub.add_parser("search-scrape", help="Run web_search_and_scrape")
    p_ss.add_argument("--query", required=True, help="Search query string")
    p_ss.add_argument("--max-results", type=int, default=3, help="Number of results to scrape")
    p_ss.add_argument("--language", default="zh-CN", help="Search language, e.g. zh-CN, en-US")
    p_ss.set_defaults(func=cmd_search_scrape)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.log_level)
    func = getattr(args, "func", cmd_serve)
    if inspect.iscoroutinefunction(func):
        return asyncio.run(func(args, settings))
    return func(args, settings)


if __name__ == "__main__":
    raise SystemExit(main())
