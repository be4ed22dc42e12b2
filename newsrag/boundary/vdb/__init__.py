"""Vector database boundary (Qdrant)."""

from .qdrant_store import QdrantVectorStore
from .vector_schemas import ChunkPayload, VectorSearchResult

__all__ = ["ChunkPayload", "QdrantVectorStore", "VectorSearchResult"]
