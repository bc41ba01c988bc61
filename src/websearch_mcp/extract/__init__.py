from .text import PageContent, PageMetadata, extract_page, excerpt, UNTITLED, TRUNCATION_MARKER

__all__ = ["PageContent", "PageMetadata", "extract_page", "excerpt", "UNTITLED", "TRUNCATION_MARKER"]
