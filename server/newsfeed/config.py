"""Configuration settings for the Newsfeed server."""

from pathlib import Path
from functools import lru_cache
from typing import Optional
from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings


def _find_env_file() -> str:
    """Find .env file - check current dir, then parent (repo root)."""
    current = Path.cwd()

    # Check current directory
    if (current / ".env").exists():
        return str(current / ".env")

    # Check parent directory (when running from server/)
    if (current.parent / ".env").exists():
        return str(current.parent / ".env")

    # Check two levels up (when running from server/newsfeed/)
    if (current.parent.parent / ".env").exists():
        return str(current.parent.parent / ".env")

    # Default to current directory
    return ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server settings
    port: int = 5000
    host: str = "0.0.0.0"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "json"  # json or console

    # NewsAPI
    news_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("NEWS_API_KEY", "API_KEY"),
    )
    news_api_base_url: str = "https://newsapi.org/v2"
    upstream_timeout: float = 10.0
    default_page_size: int = 40

    # Response cache
    news_cache_ttl: float = 600  # 10 minutes
    news_cache_max_entries: int = 0  # 0 = unbounded
    cache_ttl_ms: Optional[int] = None  # legacy CACHE_TTL_MS override

    class Config:
        env_file = _find_env_file()
        env_file_encoding = "utf-8"
        extra = "ignore"
        populate_by_name = True

    @model_validator(mode="after")
    def _apply_legacy_ttl(self) -> "Settings":
        if self.cache_ttl_ms is not None:
            self.news_cache_ttl = max(self.cache_ttl_ms / 1000, 0)
        return self

    @property
    def has_api_key(self) -> bool:
        return bool(self.news_api_key)


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
