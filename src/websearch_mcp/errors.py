from __future__ import annotations


class WebSearchError(Exception):
    """Base class for errors reported back to the tool caller."""


class ConfigurationError(WebSearchError):
    pass


class SearchError(WebSearchError):
    pass


class FetchError(WebSearchError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"{reason} ({url})")
        self.url = url
        self.reason = reason


class InvalidArgumentError(WebSearchError):
    pass


class UnknownToolError(WebSearchError):
    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}")
        self.name = name
