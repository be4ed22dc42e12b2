"""
Vector store configuration settings.

Manages Qdrant connection and collection configuration for chunk storage
and similarity search.

Dependencies: pydantic, pydantic_settings
System role: Vector database configuration for RAG retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VectorStoreSettings(BaseSettings):
    """Qdrant vector store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QDRANT_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(description="Qdrant endpoint URL")
    api_key: str | None = Field(default=None, description="Qdrant API key")
    collection_name: str = Field(description="Collection holding all article chunks")
    distance: str = Field(default="Cosine", description="Distance metric for the collection")
    top_k: int = Field(default=3, description="Number of chunks retrieved per query", ge=1)
    timeout_seconds: int = Field(default=30, description="Qdrant request timeout in seconds")
