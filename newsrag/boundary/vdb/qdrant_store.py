"""
Qdrant vector store adapter.

Manages the article-chunk collection: wholesale reset, synchronous upsert
and cosine similarity search. Search retries transient transport failures
with exponential backoff.

Dependencies: qdrant_client, tenacity, newsrag.core.exceptions
System role: Vector store client for ingestion and retrieval
"""

import logging
from collections.abc import Sequence

from qdrant_client import QdrantClient, models
from qdrant_client.http.exceptions import ResponseHandlingException, UnexpectedResponse
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from newsrag.boundary.vdb.vector_schemas import ChunkPayload, VectorSearchResult
from newsrag.core.document_processing.models import ChunkPoint
from newsrag.core.exceptions import SetupError, VectorStoreError

logger = logging.getLogger(__name__)


class QdrantVectorStore:
    """
    Qdrant adapter bound to a single named collection.

    Every call is a blocking network request; async callers should run
    them in a thread pool.
    """

    def __init__(
        self,
        client: QdrantClient,
        collection_name: str,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialize adapter.

        Args:
            client: Configured Qdrant client
            collection_name: Collection holding all chunks
            max_attempts: Attempts for retried operations (search)
        """
        if not collection_name:
            raise ValueError("collection_name cannot be empty")
        self._client = client
        self.collection_name = collection_name
        self._max_attempts = max_attempts

    @classmethod
    def from_settings(cls, url: str, api_key: str | None, collection_name: str, timeout: int = 30) -> "QdrantVectorStore":
        """Build an adapter with its own Qdrant client."""
        return cls(
            client=QdrantClient(url=url, api_key=api_key, timeout=timeout),
            collection_name=collection_name,
        )

    def reset_collection(self, dimension: int, distance: str = "Cosine") -> None:
        """
        Drop the collection if present, then create it empty.

        Args:
            dimension: Vector dimensionality for the new collection
            distance: Qdrant distance name (Cosine, Dot, Euclid, Manhattan)

        Raises:
            SetupError: When the collection cannot be created
        """
        try:
            self._client.delete_collection(collection_name=self.collection_name)
            logger.info(f'{__name__}:reset_collection - Collection "{self.collection_name}" deleted')
        except (UnexpectedResponse, ResponseHandlingException) as e:
            # Missing collection on first run; creation below decides success
            logger.info(
                f'{__name__}:reset_collection - Collection "{self.collection_name}" not deleted '
                f"({type(e).__name__}), proceeding with creation"
            )

        try:
            self._client.create_collection(
                collection_name=self.collection_name,
                vectors_config=models.VectorParams(
                    size=dimension,
                    distance=models.Distance(distance),
                ),
            )
        except Exception as e:
            raise SetupError(
                f"Failed to create collection: {e}",
                collection=self.collection_name,
                details={"dimension": dimension, "distance": distance},
            ) from e

        logger.info(
            f'{__name__}:reset_collection - Collection "{self.collection_name}" created',
            extra={"dimension": dimension, "distance": distance},
        )

    def upsert(self, points: Sequence[ChunkPoint]) -> None:
        """
        Write or replace points by ID, waiting for acknowledgement.

        Args:
            points: Chunk points to write

        Raises:
            VectorStoreError: When the upsert fails
        """
        if not points:
            logger.info(f"{__name__}:upsert - No points to upload for this article")
            return

        try:
            self._client.upsert(
                collection_name=self.collection_name,
                wait=True,
                points=[
                    models.PointStruct(id=point.id, vector=point.vector, payload=point.payload)
                    for point in points
                ],
            )
        except Exception as e:
            raise VectorStoreError(
                f"Failed to upsert points: {e}",
                operation="upsert",
                details={"point_count": len(points), "collection": self.collection_name},
            ) from e

        logger.info(f"{__name__}:upsert - Uploaded {len(points)} points to Qdrant")

    def search(self, vector: list[float], k: int = 3, with_payload: bool = True) -> list[VectorSearchResult]:
        """
        Find the k most similar chunks.

        Args:
            vector: Query embedding
            k: Number of results
            with_payload: Include stored payloads

        Returns:
            list[VectorSearchResult]: Results by descending score; empty when
            nothing matches

        Raises:
            VectorStoreError: When the query fails after retries
        """
        try:
            scored = self._query_with_retry(vector, k, with_payload)
        except Exception as e:
            raise VectorStoreError(
                f"Failed to search collection: {e}",
                operation="search",
                details={"k": k, "collection": self.collection_name},
            ) from e

        results = [
            VectorSearchResult(
                point_id=str(point.id),
                score=point.score,
                payload=ChunkPayload(**(point.payload or {})),
            )
            for point in scored
        ]
        results.sort(key=lambda result: result.score, reverse=True)
        return results

    def _query_with_retry(self, vector: list[float], k: int, with_payload: bool):
        """Run query_points, retrying transport-level failures."""

        @retry(
            retry=retry_if_exception_type(ResponseHandlingException),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=0.5, max=8, jitter=1),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:search - Retry {retry_state.attempt_number}/{self._max_attempts} after transport error"
            ),
            reraise=True,
        )
        def _query():
            return self._client.query_points(
                collection_name=self.collection_name,
                query=vector,
                limit=k,
                with_payload=with_payload,
            ).points

        return _query()

    def collection_exists(self) -> bool:
        """
        Check whether the collection has been created.

        Raises:
            VectorStoreError: When Qdrant is unreachable
        """
        try:
            return bool(self._client.collection_exists(collection_name=self.collection_name))
        except Exception as e:
            raise VectorStoreError(f"Failed to check collection: {e}", operation="collection_exists") from e

    def count(self) -> int:
        """
        Count points in the collection.

        Raises:
            VectorStoreError: When the collection is unreachable
        """
        try:
            return self._client.count(collection_name=self.collection_name, exact=True).count
        except Exception as e:
            raise VectorStoreError(f"Failed to count points: {e}", operation="count") from e

    def close(self) -> None:
        """Release the underlying client."""
        self._client.close()
