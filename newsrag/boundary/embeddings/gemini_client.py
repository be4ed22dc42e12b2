"""
Google Gemini embeddings client with fixed output dimensionality.

Wraps GoogleGenerativeAIEmbeddings so every call requests the collection's
vector dimension, and reports total failure as an empty result like the
Jina client.

Dependencies: langchain_google_genai
System role: Alternative embedding generation adapter
"""

import logging

from langchain_google_genai import GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class GeminiEmbeddingClient:
    """Gemini embeddings (text-embedding-004 supports up to 768 dimensions)."""

    def __init__(
        self,
        api_key: str,
        model: str = "models/text-embedding-004",
        dimension: int = 768,
        embeddings: GoogleGenerativeAIEmbeddings | None = None,
    ) -> None:
        """
        Initialize Gemini embeddings.

        Args:
            api_key: Google API key
            model: Embedding model ID
            dimension: Output dimensionality requested on every call
            embeddings: Pre-built LangChain embeddings (tests)
        """
        self.dimension = dimension
        self._embeddings = embeddings or GoogleGenerativeAIEmbeddings(
            model=model,
            google_api_key=api_key,
        )
        logger.info(
            f"{__name__}:__init__ - Initialized with model={model}, output_dimensionality={dimension}"
        )

    def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: Vectors in input order, or [] on failure
        """
        if not texts:
            return []
        try:
            return self._embeddings.embed_documents(texts, output_dimensionality=self.dimension)
        except Exception as e:
            logger.error(
                f"{__name__}:embed - Failed to get embeddings from Gemini: {type(e).__name__}: {e}",
                extra={"batch_size": len(texts)},
            )
            return []

    def embed_query(self, text: str) -> list[float] | None:
        """Embed one question; None when the call failed."""
        vectors = self.embed([text])
        return vectors[0] if vectors else None
