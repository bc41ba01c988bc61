from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol


@dataclass(frozen=True)
class SearchResult:
    title: str
    url: str
    snippet: str
    rank: int
    source: str | None = None


class SearchClient(Protocol):
    async def search(self, query: str, count: int = 10, language: str = "zh-CN") -> List[SearchResult]:
        ...

    async def aclose(self) -> None:
        ...

    async def __aenter__(self) -> "SearchClient":
        ...

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        ...
