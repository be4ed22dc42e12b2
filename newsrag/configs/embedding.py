"""
Embedding service configuration settings.

Selects the embedding provider and holds the Jina endpoint, key and model.

Dependencies: pydantic, pydantic_settings
System role: Embedding client configuration
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EmbeddingSettings(BaseSettings):
    """Embedding provider configuration (Jina by default, Gemini optional)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    embedding_provider: str = Field(
        default="jina",
        description="Embedding provider: 'jina' or 'gemini'",
    )
    embedding_dimension: int = Field(
        default=768,
        description="Vector dimensionality shared by every point in the collection",
    )
    embedding_timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for a single embedding batch request",
    )

    jina_api_key: str | None = Field(default=None, description="Jina AI API key")
    jina_api_url: str = Field(
        default="https://api.jina.ai/v1/embeddings",
        description="Jina embeddings endpoint",
    )
    jina_model: str = Field(
        default="jina-embeddings-v2-base-en",
        description="Jina embedding model (768 dimensions)",
    )

    @model_validator(mode="after")
    def _require_provider_key(self) -> "EmbeddingSettings":
        provider = self.embedding_provider.lower()
        if provider not in ("jina", "gemini"):
            raise ValueError(
                f"Invalid EMBEDDING_PROVIDER: {self.embedding_provider}. Must be 'jina' or 'gemini'."
            )
        if provider == "jina" and not self.jina_api_key:
            raise ValueError("JINA_API_KEY is required when EMBEDDING_PROVIDER is 'jina'")
        return self
