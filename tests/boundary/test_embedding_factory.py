"""
Test suite for the embedding client factory.

System role: Verification of provider selection
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from newsrag.boundary.embeddings import (
    GeminiEmbeddingClient,
    JinaEmbeddingClient,
    get_embedding_client,
)
from newsrag.configs.embedding import EmbeddingSettings


class TestGetEmbeddingClient:
    """Test suite for get_embedding_client."""

    def test_jina_provider_should_build_jina_client(self) -> None:
        settings = EmbeddingSettings(embedding_provider="jina", jina_api_key="key")

        client = get_embedding_client(settings, http_client=httpx.Client())

        assert isinstance(client, JinaEmbeddingClient)
        assert client.dimension == 768

    def test_gemini_provider_should_build_gemini_client(self) -> None:
        settings = EmbeddingSettings(embedding_provider="gemini")

        with patch(
            "newsrag.boundary.embeddings.gemini_client.GoogleGenerativeAIEmbeddings",
            return_value=MagicMock(),
        ) as embeddings_cls:
            client = get_embedding_client(settings, gemini_api_key="gkey")

        assert isinstance(client, GeminiEmbeddingClient)
        assert embeddings_cls.call_args.kwargs["google_api_key"] == "gkey"

    def test_gemini_provider_without_key_should_raise(self) -> None:
        settings = EmbeddingSettings(embedding_provider="gemini")

        with pytest.raises(ValueError):
            get_embedding_client(settings)


class TestGeminiEmbeddingClient:
    """Test suite for GeminiEmbeddingClient.embed."""

    def test_embed_should_request_configured_dimension(self) -> None:
        embeddings = MagicMock()
        embeddings.embed_documents.return_value = [[0.1] * 768]
        client = GeminiEmbeddingClient(api_key="key", embeddings=embeddings)

        assert client.embed(["text"]) == [[0.1] * 768]
        embeddings.embed_documents.assert_called_once_with(["text"], output_dimensionality=768)

    def test_embed_should_return_empty_on_failure(self) -> None:
        embeddings = MagicMock()
        embeddings.embed_documents.side_effect = RuntimeError("quota")
        client = GeminiEmbeddingClient(api_key="key", embeddings=embeddings)

        assert client.embed(["text"]) == []
