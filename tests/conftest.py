"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory Redis double, fake generator, search result builders,
required environment variables
Dependencies: pytest, redis
System role: Test infrastructure and fixture management
"""

from unittest.mock import MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from newsrag.boundary.cache import RedisSessionStore
from newsrag.boundary.vdb import ChunkPayload, VectorSearchResult


REQUIRED_ENV = {
    "JINA_API_KEY": "jina-test-key",
    "GEMINI_API_KEY": "gemini-test-key",
    "QDRANT_URL": "http://localhost:6333",
    "QDRANT_COLLECTION_NAME": "news_articles",
    "REDIS_URL": "redis://localhost:6379/0",
}


class FakePipeline:
    """Buffers commands and applies them on execute, like a MULTI/EXEC pipeline."""

    def __init__(self, redis: "FakeRedis") -> None:
        self._redis = redis
        self._ops: list[tuple] = []

    async def __aenter__(self) -> "FakePipeline":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        self._ops.clear()
        return False

    def rpush(self, key: str, *values: str) -> "FakePipeline":
        self._ops.append(("rpush", key, values))
        return self

    def expire(self, key: str, seconds: int) -> "FakePipeline":
        self._ops.append(("expire", key, seconds))
        return self

    async def execute(self) -> list:
        self._redis.check()
        results = []
        for op, key, arg in self._ops:
            if op == "rpush":
                results.append(await self._redis.rpush(key, *arg))
            else:
                results.append(await self._redis.expire(key, arg))
        self._ops.clear()
        return results


class FakeRedis:
    """
    In-memory stand-in for the subset of redis.asyncio.Redis the store uses.

    Time is a manual clock: ``advance`` moves it forward and keys whose TTL
    has elapsed disappear on their next access, as in Redis.
    """

    def __init__(self) -> None:
        self.lists: dict[str, list[str]] = {}
        self.ttls: dict[str, int] = {}
        self.deadlines: dict[str, float] = {}
        self.now = 0.0
        self.fail = False

    def check(self) -> None:
        if self.fail:
            raise RedisConnectionError("Connection refused")

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def _evict_if_expired(self, key: str) -> None:
        deadline = self.deadlines.get(key)
        if deadline is not None and self.now >= deadline:
            self.lists.pop(key, None)
            self.ttls.pop(key, None)
            self.deadlines.pop(key, None)

    def pipeline(self, transaction: bool = True) -> FakePipeline:
        return FakePipeline(self)

    async def rpush(self, key: str, *values: str) -> int:
        self.check()
        self._evict_if_expired(key)
        self.lists.setdefault(key, []).extend(values)
        return len(self.lists[key])

    async def expire(self, key: str, seconds: int) -> bool:
        self.check()
        self._evict_if_expired(key)
        if key not in self.lists:
            return False
        self.ttls[key] = seconds
        self.deadlines[key] = self.now + seconds
        return True

    async def lrange(self, key: str, start: int, end: int) -> list[str]:
        self.check()
        self._evict_if_expired(key)
        items = self.lists.get(key, [])
        return list(items[start:] if end == -1 else items[start:end + 1])

    async def delete(self, *keys: str) -> int:
        self.check()
        removed = 0
        for key in keys:
            self._evict_if_expired(key)
            if self.lists.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
            self.deadlines.pop(key, None)
        return removed

    async def ping(self) -> bool:
        self.check()
        return True

    async def aclose(self) -> None:
        pass


class FakeGenerator:
    """Yields scripted fragments; optionally fails before fragment ``fail_at``."""

    def __init__(self, fragments: list[str], fail_at: int | None = None) -> None:
        self.fragments = fragments
        self.fail_at = fail_at
        self.messages = None
        self.closed = False

    async def stream(self, messages):
        self.messages = messages
        try:
            for index, fragment in enumerate(self.fragments):
                if self.fail_at == index:
                    raise RuntimeError("model unavailable")
                yield fragment
            if self.fail_at is not None and self.fail_at >= len(self.fragments):
                raise RuntimeError("model unavailable")
        finally:
            self.closed = True


def make_result(text: str, score: float = 0.9, url: str = "https://www.theguardian.com/a") -> VectorSearchResult:
    """Build a search result carrying one passage."""
    return VectorSearchResult(point_id="p-1", score=score, payload=ChunkPayload(url=url, text=text))


@pytest.fixture
def fake_redis() -> FakeRedis:
    """Provide an empty in-memory Redis."""
    return FakeRedis()


@pytest.fixture
def session_store(fake_redis: FakeRedis) -> RedisSessionStore:
    """Provide a session store over the in-memory Redis."""
    return RedisSessionStore(client=fake_redis, ttl_seconds=3600)


@pytest.fixture
def mock_embedding_client() -> MagicMock:
    """Provide an embedding client returning one 4-d vector per text."""
    client = MagicMock()
    client.dimension = 4
    client.embed.side_effect = lambda texts: [[0.1, 0.2, 0.3, 0.4] for _ in texts]
    client.embed_query.side_effect = lambda text: [0.1, 0.2, 0.3, 0.4]
    return client


@pytest.fixture
def mock_vector_store() -> MagicMock:
    """Provide a vector store returning two passages."""
    store = MagicMock()
    store.collection_name = "news_articles"
    store.search.return_value = [
        make_result("Markets rallied on Monday.", score=0.92),
        make_result("The central bank held rates.", score=0.81),
    ]
    return store


@pytest.fixture
def required_env(monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Set every required environment variable."""
    for key, value in REQUIRED_ENV.items():
        monkeypatch.setenv(key, value)
    return dict(REQUIRED_ENV)


@pytest.fixture
def result_factory():
    """Provide the search result builder."""
    return make_result


@pytest.fixture
def generator_factory():
    """Provide the scripted generator class."""
    return FakeGenerator
