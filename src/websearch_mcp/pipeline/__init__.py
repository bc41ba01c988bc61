from .search_scrape import (
    FailedSection,
    PipelineReport,
    ScrapedSection,
    Section,
    search_and_scrape,
    PIPELINE_EXCERPT_CHARS,
)

__all__ = [
    "FailedSection",
    "PipelineReport",
    "ScrapedSection",
    "Section",
    "search_and_scrape",
    "PIPELINE_EXCERPT_CHARS",
]
