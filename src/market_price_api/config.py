"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # CoinGecko
    coingecko_api_key: str = ""
    coingecko_timeout: float = 10.0

    # Yahoo Finance search limits
    stock_search_max_results: int = 10
    stock_search_news_count: int = 8

    # Response cache (seconds; 0 disables)
    cache_ttl: float = 10.0
    cache_max_entries: int = 100


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()
