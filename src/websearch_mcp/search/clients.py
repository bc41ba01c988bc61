from __future__ import annotations

from typing import Optional, Tuple

import httpx

from ..api_config import ApiConfig, load_api_config
from ..errors import ConfigurationError
from ..settings import Settings
from .base import SearchClient
from .google import GoogleSearchClient
from .placeholder import PlaceholderSearchClient


def search_credentials(settings: Settings, api_config: ApiConfig) -> Tuple[Optional[str], Optional[str]]:
    """(api_key, engine_id); explicit settings win over apis.yaml."""
    api_key = settings.search_api_key or api_config.google.api_key
    engine_id = settings.search_engine_id or api_config.google.engine_id
    return api_key, engine_id


def get_search_client(
    settings: Settings,
    api_config: ApiConfig | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SearchClient:
    cfg = api_config or load_api_config(settings.api_config_path)
    api_key, engine_id = search_credentials(settings, cfg)
    if not api_key or not engine_id:
        return PlaceholderSearchClient()
    if settings.search_provider == "google":
        return GoogleSearchClient(
            api_key=api_key,
            engine_id=engine_id,
            request_timeout=settings.timeout_seconds,
            transport=transport,
        )
    raise ConfigurationError(f"Unsupported search provider: {settings.search_provider}")
