"""
Jina AI embeddings client.

Sends each batch of texts to the Jina embeddings endpoint in a single
request. Total failure is reported as an empty result, never raised.

Dependencies: httpx, tenacity
System role: Default embedding generation adapter
"""

import logging

import httpx
from tenacity import (
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = {429, 500, 502, 503, 504}


def _is_transient(exc: BaseException) -> bool:
    if isinstance(exc, httpx.TransportError):
        return True
    return isinstance(exc, httpx.HTTPStatusError) and exc.response.status_code in RETRYABLE_STATUS


def _error_detail(exc: BaseException) -> str:
    """Prefer the service's 'detail' message over the generic exception text."""
    if isinstance(exc, httpx.HTTPStatusError):
        try:
            return str(exc.response.json().get("detail", exc))
        except (ValueError, AttributeError):
            return str(exc)
    return str(exc)


class JinaEmbeddingClient:
    """Jina embeddings over HTTP (jina-embeddings-v2-base-en, 768 dimensions)."""

    def __init__(
        self,
        api_key: str,
        http_client: httpx.Client,
        model: str = "jina-embeddings-v2-base-en",
        api_url: str = "https://api.jina.ai/v1/embeddings",
        dimension: int = 768,
        max_attempts: int = 3,
    ) -> None:
        """
        Initialize Jina client.

        Args:
            api_key: Jina API key (sent as a bearer token)
            http_client: Shared HTTP client; its timeout bounds each batch
            model: Embedding model name
            api_url: Embeddings endpoint
            dimension: Expected vector dimensionality
            max_attempts: Attempts per batch for transient failures

        Raises:
            ValueError: When api_key is empty
        """
        if not api_key:
            raise ValueError("api_key cannot be empty")
        self._api_key = api_key
        self._http = http_client
        self.model = model
        self.api_url = api_url
        self.dimension = dimension
        self._max_attempts = max_attempts

    def embed(self, texts: list[str]) -> list[list[float]]:
        """
        Embed a batch of texts in one request.

        Args:
            texts: Texts to embed

        Returns:
            list[list[float]]: Vectors in input order, or [] on failure
        """
        if not texts:
            return []

        try:
            payload = self._post_with_retry(texts)
            items = sorted(payload["data"], key=lambda item: item.get("index", 0))
            vectors = [item["embedding"] for item in items]
        except (httpx.HTTPError, KeyError, IndexError, TypeError, AttributeError, ValueError) as e:
            logger.error(
                f"{__name__}:embed - Failed to get embeddings from Jina: {_error_detail(e)}",
                extra={"batch_size": len(texts), "error_type": type(e).__name__},
            )
            return []

        if len(vectors) != len(texts):
            logger.warning(
                f"{__name__}:embed - Jina returned {len(vectors)} vectors for {len(texts)} texts"
            )
        return vectors

    def embed_query(self, text: str) -> list[float] | None:
        """Embed one question; None when the call failed."""
        vectors = self.embed([text])
        return vectors[0] if vectors else None

    def _post_with_retry(self, texts: list[str]) -> dict:
        @retry(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(self._max_attempts),
            wait=wait_exponential_jitter(initial=1, max=10, jitter=1),
            before_sleep=lambda retry_state: logger.warning(
                f"{__name__}:embed - Retry {retry_state.attempt_number}/{self._max_attempts} after transient error"
            ),
            reraise=True,
        )
        def _post() -> dict:
            response = self._http.post(
                self.api_url,
                json={"input": texts, "model": self.model},
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._api_key}",
                },
            )
            response.raise_for_status()
            return response.json()

        return _post()
