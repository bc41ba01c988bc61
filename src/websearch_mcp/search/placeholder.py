from __future__ import annotations

from typing import List, Optional

from .base import SearchResult


PLACEHOLDER_MAX_RESULTS = 3


class PlaceholderSearchClient:
    """Offline stand-in used when no search credentials are configured.

    Results are derived only from the query, so repeated calls are identical.
    """

    async def aclose(self) -> None:
        return None

    async def __aenter__(self) -> "PlaceholderSearchClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        return None

    async def search(self, query: str, count: int = 10, language: str = "zh-CN") -> List[SearchResult]:
        n = max(0, min(PLACEHOLDER_MAX_RESULTS, count))
        return [
            SearchResult(
                title=f'Search result {rank} for "{query}"',
                url=f"https://example.com/result{rank}",
                snippet=f'Example summary {rank} for "{query}".',
                rank=rank,
                source="placeholder",
            )
            for rank in range(1, n + 1)
        ]
