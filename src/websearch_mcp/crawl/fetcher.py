from __future__ import annotations

import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from ..errors import FetchError
from ..settings import DEFAULT_USER_AGENT
from .models import Page


log = logging.getLogger(__name__)


class Fetcher:
    """Single-page HTTP fetcher.

    One GET per call, bounded by ``request_timeout`` (seconds), no retries.
    Any transport error, timeout or non-2xx status raises :class:`FetchError`.
    """

    def __init__(
        self,
        user_agent: str = DEFAULT_USER_AGENT,
        request_timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._client = httpx.AsyncClient(
            headers={
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml",
            },
            timeout=request_timeout,
            follow_redirects=True,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "Fetcher":  # type: ignore[override]
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:  # type: ignore[override]
        await self.aclose()
        return None

    async def fetch(self, url: str) -> Page:
        scheme = urlparse(url).scheme.lower()
        if scheme not in ("http", "https"):
            raise FetchError(url, "only absolute http(s) URLs can be fetched")
        log.debug("fetching %s", url)
        try:
            res = await self._client.get(url)
            res.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise FetchError(url, f"HTTP {e.response.status_code}") from e
        except httpx.TimeoutException as e:
            raise FetchError(url, "request timed out") from e
        except httpx.HTTPError as e:
            raise FetchError(url, str(e) or type(e).__name__) from e
        log.debug("fetched %s status=%d bytes=%d", url, res.status_code, len(res.content))
        return Page(
            url=url,
            final_url=str(res.request.url),
            status=res.status_code,
            content_type=res.headers.get("content-type"),
            encoding=res.encoding,
            html=res.text,
        )
