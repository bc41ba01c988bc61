from .base import SearchClient, SearchResult
from .clients import get_search_client, search_credentials
from .google import GoogleSearchClient
from .placeholder import PlaceholderSearchClient

__all__ = ["SearchClient", "SearchResult", "get_search_client", "search_credentials", "GoogleSearchClient", "PlaceholderSearchClient"]
