from __future__ import annotations

from typing import List, Sequence

from ..extract import PageContent, excerpt
from ..pipeline import FailedSection, PipelineReport, PIPELINE_EXCERPT_CHARS
from ..search.base import SearchResult


SCRAPE_EXCERPT_CHARS = 500

PLACEHOLDER_NOTE = (
    "Note: these are placeholder results. Configure SEARCH_API_KEY and "
    "SEARCH_ENGINE_ID to get real search results."
)

_METADATA_LABELS = (
    ("description", "Description"),
    ("keywords", "Keywords"),
    ("author", "Author"),
    ("published_date", "Published"),
)


def _is_placeholder(results: Sequence[SearchResult]) -> bool:
    return bool(results) and all(r.source == "placeholder" for r in results)


def format_search_results(query: str, results: Sequence[SearchResult]) -> str:
    placeholder = _is_placeholder(results)
    header = f'Search results for "{query}"'
    header += " (placeholder data):" if placeholder else ":"
    if not results:
        return f"{header}\n\nNo results found."
    blocks = [
        f"{r.rank}. **{r.title}**\n   URL: {r.url}\n   Summary: {r.snippet}\n"
        for r in results
    ]
    text = f"{header}\n\n" + "\n".join(blocks)
    if placeholder:
        text += f"\n\n{PLACEHOLDER_NOTE}"
    return text


def format_page(content: PageContent, include_text: bool = True, include_metadata: bool = True) -> str:
    lines: List[str] = ["Page scrape result:", ""]
    lines.append(f"**Title**: {content.title}")
    lines.append(f"**URL**: {content.url}")
    lines.append("")
    if include_metadata:
        meta = content.metadata.as_dict()
        lines.append("**Metadata**:")
        for key, label in _METADATA_LABELS:
            if key in meta:
                lines.append(f"- {label}: {meta[key]}")
        lines.append("")
    if include_text:
        lines.append(f"**Content excerpt** (first {SCRAPE_EXCERPT_CHARS} characters):")
        lines.append(excerpt(content.text, SCRAPE_EXCERPT_CHARS))
    return "\n".join(lines).rstrip("\n")


def format_pipeline_report(report: PipelineReport) -> str:
    parts: List[str] = [f'Search and scrape results for "{report.query}":', ""]
    if not report.sections:
        parts.append("No results found.")
    for section in report.sections:
        r = section.result
        parts.append(f"## {r.rank}. {r.title}")
        parts.append(f"**URL**: {r.url}")
        parts.append(f"**Search summary**: {r.snippet}")
        parts.append("")
        if isinstance(section, FailedSection):
            parts.append(f"**Scrape failed**: {section.error}")
        else:
            parts.append(f"**Content excerpt** (first {PIPELINE_EXCERPT_CHARS} characters):")
            parts.append(section.excerpt)
        parts.append("")
    return "\n".join(parts).rstrip("\n")
