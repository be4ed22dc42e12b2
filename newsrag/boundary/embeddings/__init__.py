"""Embedding service boundary (Jina HTTP API, Google Gemini)."""

from .base import EmbeddingClient
from .factory import get_embedding_client
from .gemini_client import GeminiEmbeddingClient
from .jina_client import JinaEmbeddingClient

__all__ = [
    "EmbeddingClient",
    "GeminiEmbeddingClient",
    "JinaEmbeddingClient",
    "get_embedding_client",
]
