"""
Generation service configuration settings.

Holds Google Gemini credentials and model parameters for answer generation
(and for Gemini embeddings when that provider is selected).

Dependencies: pydantic, pydantic_settings
System role: LLM configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GenerationSettings(BaseSettings):
    """Google Gemini configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GEMINI_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(description="Google Gemini API key")
    model: str = Field(default="gemini-1.5-flash", description="Gemini chat model ID")
    temperature: float = Field(default=0.3, description="Sampling temperature", ge=0.0, le=2.0)
    embedding_model: str = Field(
        default="models/text-embedding-004",
        description="Gemini embedding model (used when EMBEDDING_PROVIDER=gemini)",
    )
