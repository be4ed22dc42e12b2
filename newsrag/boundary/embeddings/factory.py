"""
Embedding client factory for selecting between Jina (default) and Gemini.

Depends on the EMBEDDING_PROVIDER setting.
Provides a consistent interface regardless of provider.

Dependencies: httpx, newsrag.boundary.embeddings, newsrag.configs
System role: Embedding client instantiation and selection
"""

import logging

import httpx

from newsrag.boundary.embeddings.base import EmbeddingClient
from newsrag.boundary.embeddings.gemini_client import GeminiEmbeddingClient
from newsrag.boundary.embeddings.jina_client import JinaEmbeddingClient
from newsrag.configs.embedding import EmbeddingSettings

logger = logging.getLogger(__name__)


def get_embedding_client(
    settings: EmbeddingSettings,
    http_client: httpx.Client | None = None,
    gemini_api_key: str | None = None,
    gemini_model: str = "models/text-embedding-004",
) -> EmbeddingClient:
    """
    Build the configured embedding client.

    Args:
        settings: Embedding settings
        http_client: HTTP client for Jina (created with the configured timeout if None)
        gemini_api_key: Google API key, required for the gemini provider
        gemini_model: Gemini embedding model ID

    Returns:
        EmbeddingClient: Jina or Gemini client

    Raises:
        ValueError: If the provider is unknown or its key is missing
    """
    provider = settings.embedding_provider.lower()

    if provider == "jina":
        logger.info(f"{__name__}:get_embedding_client - Creating Jina client (model={settings.jina_model})")
        return JinaEmbeddingClient(
            api_key=settings.jina_api_key or "",
            http_client=http_client or httpx.Client(timeout=settings.embedding_timeout_seconds),
            model=settings.jina_model,
            api_url=settings.jina_api_url,
            dimension=settings.embedding_dimension,
        )

    elif provider == "gemini":
        if not gemini_api_key:
            raise ValueError("GEMINI_API_KEY is required when EMBEDDING_PROVIDER is 'gemini'")
        logger.info(f"{__name__}:get_embedding_client - Creating Gemini client (model={gemini_model})")
        return GeminiEmbeddingClient(
            api_key=gemini_api_key,
            model=gemini_model,
            dimension=settings.embedding_dimension,
        )

    else:
        raise ValueError(
            f"Invalid EMBEDDING_PROVIDER: {provider}. Must be 'jina' or 'gemini'."
        )
