"""
Dependency injection container.

Clients are built once in the application lifespan, held on
``app.state.container`` and handed to request handlers through FastAPI
dependencies. Tests override ``get_chat_service`` / ``get_session_service``.

Dependencies: fastapi, httpx, qdrant_client, redis, newsrag.configs
System role: DI container for service injection
"""

import logging

import httpx
from fastapi import Depends, Request

from newsrag.application.services import ChatService, SessionService
from newsrag.boundary.cache import RedisSessionStore
from newsrag.boundary.embeddings import EmbeddingClient, get_embedding_client
from newsrag.boundary.vdb import QdrantVectorStore
from newsrag.configs import Settings
from newsrag.core.rag_query import GeminiGenerator

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Long-lived clients shared by every request."""

    def __init__(
        self,
        settings: Settings,
        embedding_client: EmbeddingClient,
        vector_store: QdrantVectorStore,
        session_store: RedisSessionStore,
        generator: GeminiGenerator,
        http_client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings
        self.embedding_client = embedding_client
        self.vector_store = vector_store
        self.session_store = session_store
        self.generator = generator
        self._http_client = http_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "ServiceContainer":
        """
        Build every client from validated settings.

        Args:
            settings: Application settings

        Returns:
            ServiceContainer: Ready-to-use container
        """
        http_client = httpx.Client(timeout=settings.embedding.embedding_timeout_seconds)
        embedding_client = get_embedding_client(
            settings.embedding,
            http_client=http_client,
            gemini_api_key=settings.generation.api_key,
            gemini_model=settings.generation.embedding_model,
        )
        vector_store = QdrantVectorStore.from_settings(
            url=settings.vector_store.url,
            api_key=settings.vector_store.api_key,
            collection_name=settings.vector_store.collection_name,
            timeout=settings.vector_store.timeout_seconds,
        )
        session_store = RedisSessionStore.from_url(
            settings.session_store.url,
            password=settings.session_store.password,
            ttl_seconds=settings.session_store.session_ttl_seconds,
            key_prefix=settings.session_store.key_prefix,
        )
        generator = GeminiGenerator(
            api_key=settings.generation.api_key,
            model=settings.generation.model,
            temperature=settings.generation.temperature,
        )
        logger.info(
            f"{__name__}:from_settings - Services initialized",
            extra={
                "embedding_provider": settings.embedding.embedding_provider,
                "collection": settings.vector_store.collection_name,
                "model": settings.generation.model,
            },
        )
        return cls(
            settings=settings,
            embedding_client=embedding_client,
            vector_store=vector_store,
            session_store=session_store,
            generator=generator,
            http_client=http_client,
        )

    async def aclose(self) -> None:
        """Release network resources."""
        await self.session_store.close()
        self.vector_store.close()
        if self._http_client is not None:
            self._http_client.close()


def get_container(request: Request) -> ServiceContainer:
    """Get the container built at startup."""
    return request.app.state.container


def get_chat_service(container: ServiceContainer = Depends(get_container)) -> ChatService:
    """
    Get chat service instance.

    Args:
        container: Service container (injected via Depends)

    Returns:
        ChatService: Chat service bound to the shared clients
    """
    return ChatService(
        embedding_client=container.embedding_client,
        vector_store=container.vector_store,
        generator=container.generator,
        session_store=container.session_store,
        top_k=container.settings.vector_store.top_k,
    )


def get_session_service(container: ServiceContainer = Depends(get_container)) -> SessionService:
    """Get session service instance."""
    return SessionService(session_store=container.session_store)
