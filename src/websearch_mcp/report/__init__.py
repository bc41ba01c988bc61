from .compose import format_page, format_pipeline_report, format_search_results, SCRAPE_EXCERPT_CHARS

__all__ = ["format_page", "format_pipeline_report", "format_search_results", "SCRAPE_EXCERPT_CHARS"]
