"""Configuration settings for the archive person lookup."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote archive (CORS proxy in front of the Riksarkivet API)
    proxy_base: str = "https://slaktkort01234.andersmenyit.workers.dev"
    remote_enabled: bool = True

    # HTTP Client Settings
    user_agent: str = "archive-lookup/1.0"
    fetch_timeout: float = 9.0  # wall-clock seconds per request

    # Search Settings
    min_query_length: int = 2
    max_results: int = 150

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
