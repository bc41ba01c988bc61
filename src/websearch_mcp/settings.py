from typing import Optional

from pydantic_settings import BaseSettings


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Environment variables:
    - SEARCH_API_KEY: API key for the search provider
    - SEARCH_ENGINE_ID: search engine / collection id (Google "cx")
    - SEARCH_PROVIDER: search provider name (default: "google")
    - REQUEST_TIMEOUT: request timeout in milliseconds (default: 10000)
    - MAX_RESULTS: default number of results for web_search (default: 10)
    - USER_AGENT: User-Agent sent with page fetches (desktop Chrome by default)
    - API_CONFIG_PATH: optional path to YAML file with API keys
    - LOG_LEVEL: logging level (default: "INFO")
    """

    search_api_key: Optional[str] = None
    search_engine_id: Optional[str] = None
    search_provider: str = "google"
    api_config_path: Optional[str] = None

    request_timeout: int = 10000
    max_results: int = 10
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def timeout_seconds(self) -> float:
        return self.request_timeout / 1000.0


def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
