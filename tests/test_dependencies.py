"""
Test suite for the dependency injection container.

System role: Verification of service wiring
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from newsrag.api.deps import ServiceContainer, get_chat_service, get_session_service
from newsrag.application.services import ChatService, SessionService
from newsrag.configs import load_settings


class TestServiceContainer:
    """Test suite for ServiceContainer."""

    def test_from_settings_should_build_all_clients(self, required_env) -> None:
        settings = load_settings()

        with patch("newsrag.api.deps.dependencies.QdrantVectorStore") as store_cls, patch(
            "newsrag.api.deps.dependencies.RedisSessionStore"
        ) as session_cls, patch("newsrag.api.deps.dependencies.GeminiGenerator") as generator_cls:
            container = ServiceContainer.from_settings(settings)

        store_cls.from_settings.assert_called_once_with(
            url="http://localhost:6333",
            api_key=None,
            collection_name="news_articles",
            timeout=30,
        )
        session_cls.from_url.assert_called_once_with(
            "redis://localhost:6379/0",
            password=None,
            ttl_seconds=3600,
            key_prefix="session:",
        )
        assert generator_cls.call_args.kwargs["model"] == "gemini-1.5-flash"
        assert container.embedding_client.dimension == 768

    @pytest.mark.asyncio
    async def test_aclose_should_release_clients(self) -> None:
        session_store = MagicMock()
        session_store.close = AsyncMock()
        vector_store = MagicMock()
        http_client = MagicMock()
        container = ServiceContainer(
            settings=MagicMock(),
            embedding_client=MagicMock(),
            vector_store=vector_store,
            session_store=session_store,
            generator=MagicMock(),
            http_client=http_client,
        )

        await container.aclose()

        session_store.close.assert_awaited_once()
        vector_store.close.assert_called_once()
        http_client.close.assert_called_once()


class TestDependencyFunctions:
    """Test suite for dependency factories."""

    def test_get_chat_service_should_use_configured_top_k(self) -> None:
        container = SimpleNamespace(
            embedding_client=MagicMock(),
            vector_store=MagicMock(),
            generator=MagicMock(),
            session_store=MagicMock(),
            settings=SimpleNamespace(vector_store=SimpleNamespace(top_k=5)),
        )

        service = get_chat_service(container)

        assert isinstance(service, ChatService)
        assert service.top_k == 5

    def test_get_session_service_should_share_store(self) -> None:
        store = MagicMock()

        service = get_session_service(SimpleNamespace(session_store=store))

        assert isinstance(service, SessionService)
        assert service.session_store is store
