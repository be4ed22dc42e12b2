"""
Chat service for retrieval-augmented news Q&A.

Orchestrates one chat turn: query embedding, similarity search, prompt
assembly, streamed generation and session persistence. The exchange is
recorded only once the answer has been fully produced; a failed or
abandoned stream leaves the session untouched.

Dependencies: newsrag.boundary (embeddings, vdb, cache), newsrag.core.rag_query
System role: Chat service orchestration layer
"""

import logging
import secrets
from collections.abc import AsyncIterator
from contextlib import aclosing

from fastapi.concurrency import run_in_threadpool

from newsrag.boundary.cache import RedisSessionStore
from newsrag.boundary.embeddings import EmbeddingClient
from newsrag.boundary.vdb import QdrantVectorStore, VectorSearchResult
from newsrag.core.exceptions import EmbeddingError, GenerationError, ValidationError
from newsrag.core.rag_query import GeminiGenerator, build_context, build_messages
from newsrag.observability.log_utils import log_exception_with_context, log_with_context

logger = logging.getLogger(__name__)


def mint_session_id() -> str:
    """Return a new 32-character hex session identifier."""
    return secrets.token_hex(16)


class ChatService:
    """
    Chat service for streamed, grounded answers.

    Blocking clients (embedding, Qdrant) are called in the thread pool so
    the event loop keeps serving other streams.
    """

    def __init__(
        self,
        embedding_client: EmbeddingClient,
        vector_store: QdrantVectorStore,
        generator: GeminiGenerator,
        session_store: RedisSessionStore,
        top_k: int = 3,
    ) -> None:
        """
        Initialize chat service.

        Args:
            embedding_client: Query embedder (same model as ingestion)
            vector_store: Chunk collection to search
            generator: Streaming answer generator
            session_store: Conversation log
            top_k: Passages retrieved per question
        """
        self.embedding_client = embedding_client
        self.vector_store = vector_store
        self.generator = generator
        self.session_store = session_store
        self.top_k = top_k

    async def retrieve(self, query: str) -> list[VectorSearchResult]:
        """
        Embed the question and fetch the closest passages.

        Args:
            query: User question

        Returns:
            list[VectorSearchResult]: Up to top_k passages, best first

        Raises:
            EmbeddingError: When the question cannot be embedded
            VectorStoreError: When the search fails
        """
        vector = await run_in_threadpool(self.embedding_client.embed_query, query)
        if not vector:
            raise EmbeddingError("Failed to generate embedding for query")

        results = await run_in_threadpool(self.vector_store.search, vector, self.top_k)
        logger.info(f"{__name__}:retrieve - Retrieved {len(results)} passages")
        return results

    async def stream_answer(self, query: str | None, session_id: str) -> AsyncIterator[str]:
        """
        Stream an answer to the question, then record the exchange.

        Flow:
        1. Validate the question
        2. Embed it and retrieve passages (fallback notice when none)
        3. Stream fragments from the generator as they arrive
        4. Append {user} then {bot} to the session and refresh its TTL

        Args:
            query: User question
            session_id: Session to record the exchange under

        Yields:
            str: Non-empty answer fragments

        Raises:
            ValidationError: When the question is missing or blank
            EmbeddingError: When the question cannot be embedded
            VectorStoreError: When retrieval fails
            GenerationError: When the model fails; fragments_sent tells the
                caller whether output was already delivered
            SessionStoreError: When the completed exchange cannot be stored
        """
        if not query or not query.strip():
            raise ValidationError("Query is required.", field="query")

        log_with_context(
            logger,
            logging.INFO,
            f"{__name__}:stream_answer - START session_id={session_id}",
            query=query,
        )

        results = await self.retrieve(query)
        if not results:
            logger.warning(f"{__name__}:stream_answer - No search results, using fallback context")
        messages = build_messages(build_context(results), query)

        fragments: list[str] = []
        try:
            async with aclosing(self.generator.stream(messages)) as stream:
                async for fragment in stream:
                    fragments.append(fragment)
                    yield fragment
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:stream_answer - Generation failed after {len(fragments)} fragments",
                e,
                session_id=session_id,
            )
            raise GenerationError(
                f"Failed to generate answer: {e}",
                fragments_sent=len(fragments),
                details={"session_id": session_id},
            ) from e

        answer = "".join(fragments)
        await self.session_store.append_exchange(session_id, query, answer)
        logger.info(
            f"{__name__}:stream_answer - END session_id={session_id}, answer_len={len(answer)}"
        )
