"""
Test suite for RedisSessionStore.

Runs against the in-memory Redis double from conftest.

System role: Verification of session log ordering, TTL and failures
"""

import json

import pytest

from newsrag.boundary.cache import RedisSessionStore
from newsrag.core.exceptions import SessionStoreError


class TestAppend:
    """Test suite for append and append_exchange."""

    @pytest.mark.asyncio
    async def test_append_exchange_should_write_user_then_bot(self, session_store, fake_redis) -> None:
        await session_store.append_exchange("abc", "What happened?", "A lot.")

        assert [json.loads(entry) for entry in fake_redis.lists["session:abc"]] == [
            {"user": "What happened?"},
            {"bot": "A lot."},
        ]

    @pytest.mark.asyncio
    async def test_every_write_should_refresh_ttl(self, session_store, fake_redis) -> None:
        await session_store.append("abc", {"user": "hi"})

        assert fake_redis.ttls["session:abc"] == 3600

    @pytest.mark.asyncio
    async def test_n_exchanges_should_produce_2n_alternating_entries(self, session_store) -> None:
        # Arrange
        exchanges = [(f"question {i}", f"answer {i}") for i in range(4)]

        # Act
        for query, answer in exchanges:
            await session_store.append_exchange("abc", query, answer)
        history = await session_store.list_all("abc")

        # Assert
        assert len(history) == 8
        assert [next(iter(turn)) for turn in history] == ["user", "bot"] * 4
        assert history[6] == {"user": "question 3"}
        assert history[7] == {"bot": "answer 3"}

    @pytest.mark.asyncio
    async def test_append_should_raise_on_redis_failure(self, session_store, fake_redis) -> None:
        fake_redis.fail = True

        with pytest.raises(SessionStoreError) as exc_info:
            await session_store.append_exchange("abc", "q", "a")

        assert exc_info.value.details["session_id"] == "abc"


class TestExpiry:
    """Test suite for TTL-driven session expiry."""

    @pytest.mark.asyncio
    async def test_idle_session_should_be_gone_after_ttl(self, session_store, fake_redis) -> None:
        # Arrange
        await session_store.append_exchange("abc", "q", "a")

        # Act
        fake_redis.advance(3601)
        history = await session_store.list_all("abc")

        # Assert
        assert history == []

    @pytest.mark.asyncio
    async def test_write_within_ttl_should_extend_session_lifetime(self, session_store, fake_redis) -> None:
        # Arrange
        await session_store.append_exchange("abc", "q1", "a1")
        fake_redis.advance(3000)
        await session_store.append_exchange("abc", "q2", "a2")

        # Act
        fake_redis.advance(3000)
        history = await session_store.list_all("abc")

        # Assert
        assert len(history) == 4

    @pytest.mark.asyncio
    async def test_write_after_expiry_should_start_fresh_session(self, session_store, fake_redis) -> None:
        await session_store.append_exchange("abc", "old", "old answer")
        fake_redis.advance(3600)

        await session_store.append_exchange("abc", "new", "new answer")

        assert await session_store.list_all("abc") == [{"user": "new"}, {"bot": "new answer"}]


class TestReadAndClear:
    """Test suite for list_all, clear and refresh_ttl."""

    @pytest.mark.asyncio
    async def test_unknown_session_should_have_empty_history(self, session_store) -> None:
        assert await session_store.list_all("never-used") == []

    @pytest.mark.asyncio
    async def test_clear_should_remove_session(self, session_store) -> None:
        await session_store.append_exchange("abc", "q1", "a1")
        await session_store.append_exchange("abc", "q2", "a2")
        assert len(await session_store.list_all("abc")) == 4

        removed = await session_store.clear("abc")

        assert removed is True
        assert await session_store.list_all("abc") == []

    @pytest.mark.asyncio
    async def test_clear_unknown_session_should_report_nothing_removed(self, session_store) -> None:
        assert await session_store.clear("missing") is False

    @pytest.mark.asyncio
    async def test_refresh_ttl_should_apply_override(self, session_store, fake_redis) -> None:
        await session_store.append("abc", {"user": "hi"})

        await session_store.refresh_ttl("abc", 60)

        assert fake_redis.ttls["session:abc"] == 60

    @pytest.mark.asyncio
    async def test_list_all_should_raise_on_redis_failure(self, session_store, fake_redis) -> None:
        fake_redis.fail = True

        with pytest.raises(SessionStoreError):
            await session_store.list_all("abc")

    @pytest.mark.asyncio
    async def test_ping_should_report_unreachable_redis(self, session_store, fake_redis) -> None:
        assert await session_store.ping() is True
        fake_redis.fail = True
        assert await session_store.ping() is False

    @pytest.mark.asyncio
    async def test_custom_prefix_should_namespace_keys(self, fake_redis) -> None:
        store = RedisSessionStore(client=fake_redis, key_prefix="chat:")

        await store.append("abc", {"user": "hi"})

        assert "chat:abc" in fake_redis.lists
