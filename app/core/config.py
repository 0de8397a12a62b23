"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        base_url: Public site origin used to build sitemap URLs.
        locales: Supported content locales, default first.
        content_dir: Root directory of the course/glossary documents.
        coingecko_api_key: Optional market-data key. Keys prefixed with
            ``CG-`` are pro keys, anything else is treated as a demo key.
        price_cache_ttl_seconds: Cache lifetime for live price snapshots.
        price_fallback_ttl_seconds: Cache lifetime for the static snapshot.
        supabase_db_url: SQLAlchemy URL of the questions datastore.
            Unset means the community board is not configured.
        datastore_create_schema: Create the questions table at startup.
        ask_rate_limit: slowapi limit string for question submissions.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Buysolanas"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    base_url: str = "https://buysolanas.com"
    locales: list[str] = ["en", "zh-CN"]
    default_locale: str = "en"
    content_dir: str = "content"

    # Market data
    coingecko_api_key: Optional[str] = None
    coingecko_timeout_seconds: float = 10.0
    price_coin_ids: list[str] = ["solana", "bitcoin", "ethereum"]
    price_cache_ttl_seconds: int = 60
    price_fallback_ttl_seconds: int = 120

    # Community datastore
    supabase_db_url: Optional[str] = None
    datastore_create_schema: bool = False

    # Request limits
    ask_rate_limit: str = "5/minute"
    ask_max_field_length: int = 1000
    chat_max_length: int = 500
    questions_page_size: int = 50

    def get_content_path(self) -> Path:
        """Return the content directory, relative paths resolved from the project root."""
        path = Path(self.content_dir)
        return path if path.is_absolute() else PROJECT_ROOT / path

    def is_datastore_configured(self) -> bool:
        """Return True when a questions datastore URL is set."""
        return bool(self.supabase_db_url and self.supabase_db_url.strip())


settings = Settings()
