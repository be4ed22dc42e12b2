"""
Configuration settings for the ingestion pipeline.

Provides environment-based configuration for source acquisition, chunking
and the processed-article cap.

Dependencies: pydantic, pydantic_settings
System role: Centralized ingestion configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_SITEMAP_URLS = [
    "https://www.theguardian.com/sitemaps/news.xml",
    "https://www.theguardian.com/sitemaps/sport.xml",
    "https://www.theguardian.com/sitemaps/business.xml",
]


class IngestionSettings(BaseSettings):
    """Settings for the article ingestion pipeline."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="INGEST_",
        case_sensitive=False,
        extra="ignore",
    )

    max_articles: int = Field(
        default=50,
        description="Global cap on successfully processed articles per run",
        ge=0,
    )
    min_article_chars: int = Field(
        default=200,
        description="Articles with this many characters or fewer are skipped",
    )
    chunk_max_chars: int = Field(
        default=500,
        description="Soft upper bound on chunk length in characters",
        gt=0,
    )
    fetch_timeout_seconds: float = Field(
        default=60.0,
        description="Timeout for fetching a single sitemap or article",
    )

    # Source acquisition
    sitemap_urls: list[str] = Field(
        default_factory=lambda: list(DEFAULT_SITEMAP_URLS),
        description="Sitemaps listing article URLs (JSON list in the environment)",
    )
    url_prefix: str = Field(
        default="https://www.theguardian.com/",
        description="Only article URLs starting with this prefix are ingested",
    )

    chunk_id_strategy: str = Field(
        default="deterministic",
        description="'deterministic' (UUIDv5 of url + index) or 'random'",
        pattern="^(deterministic|random)$",
    )
