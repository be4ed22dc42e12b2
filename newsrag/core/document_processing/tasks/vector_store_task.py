"""
Qdrant upload task.

Pairs article chunks with their embeddings, assigns point IDs and writes
them to the collection.

Dependencies: uuid (stdlib), random (stdlib), newsrag.boundary.vdb
System role: Final stage of the ingestion pipeline
"""

import logging
import random
import uuid

from newsrag.boundary.vdb.qdrant_store import QdrantVectorStore
from newsrag.core.document_processing.models import ChunkPoint

logger = logging.getLogger(__name__)

# Namespace for chunk point IDs; uuid5(namespace, f"{url}#{index}")
CHUNK_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "newsrag/chunks")
RANDOM_ID_UPPER_BOUND = 1_000_000


def deterministic_chunk_id(url: str, chunk_index: int) -> str:
    """
    Derive a stable point ID from the article URL and chunk position.

    Args:
        url: Source article URL
        chunk_index: Position of the chunk within the article

    Returns:
        str: UUIDv5 string (Qdrant accepts UUIDs as point IDs)
    """
    return str(uuid.uuid5(CHUNK_ID_NAMESPACE, f"{url}#{chunk_index}"))


class VectorStoreTask:
    """Build chunk points and upsert them into Qdrant."""

    def __init__(
        self,
        vector_store: QdrantVectorStore,
        id_strategy: str = "deterministic",
        rng: random.Random | None = None,
    ) -> None:
        """
        Initialize vector store task.

        Args:
            vector_store: Qdrant adapter
            id_strategy: 'deterministic' (UUIDv5 of url + index) or 'random'
            rng: Random source for the 'random' strategy

        Raises:
            ValueError: When id_strategy is unknown
        """
        if id_strategy not in ("deterministic", "random"):
            raise ValueError(f"Unknown chunk id strategy: {id_strategy}")
        self._vector_store = vector_store
        self._id_strategy = id_strategy
        self._rng = rng or random.Random()

    def _chunk_id(self, url: str, chunk_index: int) -> str | int:
        if self._id_strategy == "random":
            # Independent draw per chunk; collisions across articles are possible
            return self._rng.randrange(RANDOM_ID_UPPER_BOUND)
        return deterministic_chunk_id(url, chunk_index)

    def build_points(
        self,
        url: str,
        chunks: list[str],
        embeddings: list[list[float]],
    ) -> list[ChunkPoint]:
        """
        Pair chunks with embeddings.

        Args:
            url: Source article URL
            chunks: Chunk texts in article order
            embeddings: One vector per chunk, same order

        Returns:
            list[ChunkPoint]: Points ready for upsert

        Raises:
            ValueError: When chunk and embedding counts differ
        """
        if len(chunks) != len(embeddings):
            raise ValueError(
                f"Chunk/embedding count mismatch: {len(chunks)} chunks, {len(embeddings)} embeddings"
            )
        return [
            ChunkPoint(id=self._chunk_id(url, index), url=url, text=chunk, vector=vector)
            for index, (chunk, vector) in enumerate(zip(chunks, embeddings))
        ]

    def upload(self, url: str, chunks: list[str], embeddings: list[list[float]]) -> int:
        """
        Build points for one article and upsert them.

        Args:
            url: Source article URL
            chunks: Chunk texts
            embeddings: Matching vectors

        Returns:
            int: Number of points written

        Raises:
            ValueError: On count mismatch
            VectorStoreError: When the upsert fails
        """
        points = self.build_points(url, chunks, embeddings)
        self._vector_store.upsert(points)
        return len(points)
