from __future__ import annotations

import logging
from typing import List, Optional

import httpx

from ..errors import SearchError
from .base import SearchResult


log = logging.getLogger(__name__)

MAX_RESULTS_PER_CALL = 10


class GoogleSearchClient:
    """Google Programmable Search (Custom Search JSON API) client.

    Docs: https://developers.google.com/custom-search/v1/reference/rest/v1/cse/list
    The API returns at most 10 items per call; larger counts are clamped.
    """

    BASE_URL = "https://www.googleapis.com/customsearch/v1"

    def __init__(
        self,
        api_key: str,
        engine_id: str,
        request_timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._api_key = api_key
        self._engine_id = engine_id
        self._client = httpx.AsyncClient(
            timeout=request_timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "GoogleSearchClient":  # type: ignore[override]
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:  # type: ignore[override]
        await self.aclose()
        return None

    async def search(self, query: str, count: int = 10, language: str = "zh-CN") -> List[SearchResult]:
        num = max(1, min(MAX_RESULTS_PER_CALL, count))
        params = {
            "key": self._api_key,
            "cx": self._engine_id,
            "q": query,
            "num": num,
            "lr": f"lang_{language}",
        }
        log.debug("google search q=%r num=%d lr=%s", query, num, params["lr"])
        try:
            resp = await self._client.get(self.BASE_URL, params=params)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise SearchError(
                f"search provider returned HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise SearchError(str(e) or type(e).__name__) from e
        try:
            data = resp.json()
        except ValueError as e:
            raise SearchError("search provider returned invalid JSON") from e

        items = data.get("items") or []
        results: List[SearchResult] = []
        for idx, item in enumerate(items, start=1):
            results.append(
                SearchResult(
                    title=item.get("title") or "",
                    url=item.get("link") or "",
                    snippet=item.get("snippet") or "",
                    rank=idx,
                    source="google",
                )
            )
        log.info("google search %r returned %d results", query, len(results))
        return results
