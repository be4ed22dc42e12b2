"""
Redis-backed conversation log.

Each session is a Redis list of JSON entries ({"user": ...} or
{"bot": ...}) in write order. Every write resets the key's TTL so idle
sessions expire through Redis itself.

Dependencies: redis (asyncio client), json (stdlib)
System role: Session store for chat history
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import RedisError

from newsrag.core.exceptions import SessionStoreError
from newsrag.models.session import make_turn

logger = logging.getLogger(__name__)

Turn = dict[str, str]


class RedisSessionStore:
    """Append-only, TTL-bounded session log."""

    def __init__(
        self,
        client: Redis,
        ttl_seconds: int = 3600,
        key_prefix: str = "session:",
    ) -> None:
        """
        Initialize session store.

        Args:
            client: redis.asyncio client
            ttl_seconds: Idle lifetime applied after every write
            key_prefix: Prefix for session list keys
        """
        self._redis = client
        self.ttl_seconds = ttl_seconds
        self.key_prefix = key_prefix

    @classmethod
    def from_url(
        cls,
        url: str,
        password: str | None = None,
        ttl_seconds: int = 3600,
        key_prefix: str = "session:",
    ) -> "RedisSessionStore":
        """Build a store with its own connection pool."""
        client = Redis.from_url(url, password=password, decode_responses=True)
        return cls(client=client, ttl_seconds=ttl_seconds, key_prefix=key_prefix)

    def _key(self, session_id: str) -> str:
        return f"{self.key_prefix}{session_id}"

    async def append(self, session_id: str, turn: Turn) -> None:
        """
        Append one turn and refresh the session TTL.

        Args:
            session_id: Session identifier
            turn: {"user": text} or {"bot": text}

        Raises:
            SessionStoreError: When Redis rejects the write
        """
        await self._push(session_id, [turn])

    async def append_exchange(self, session_id: str, query: str, answer: str) -> None:
        """
        Append a user turn then a bot turn, and refresh the TTL.

        Args:
            session_id: Session identifier
            query: User message
            answer: Complete bot answer

        Raises:
            SessionStoreError: When Redis rejects the write
        """
        await self._push(session_id, [make_turn("user", query), make_turn("bot", answer)])

    async def _push(self, session_id: str, turns: list[Turn]) -> None:
        key = self._key(session_id)
        try:
            async with self._redis.pipeline(transaction=True) as pipe:
                for turn in turns:
                    pipe.rpush(key, json.dumps(turn))
                pipe.expire(key, self.ttl_seconds)
                await pipe.execute()
        except RedisError as e:
            raise SessionStoreError(
                f"Failed to append to session: {e}",
                session_id=session_id,
                details={"turn_count": len(turns)},
            ) from e

        logger.debug(
            f"{__name__}:append - Stored {len(turns)} turn(s)",
            extra={"session_id": session_id, "ttl_seconds": self.ttl_seconds},
        )

    async def list_all(self, session_id: str) -> list[dict[str, Any]]:
        """
        Read the full session log in write order.

        Args:
            session_id: Session identifier

        Returns:
            list[dict]: Decoded turns (empty for unknown or expired sessions)

        Raises:
            SessionStoreError: When Redis is unavailable
        """
        try:
            raw_entries = await self._redis.lrange(self._key(session_id), 0, -1)
        except RedisError as e:
            raise SessionStoreError(f"Failed to read session: {e}", session_id=session_id) from e
        return [json.loads(entry) for entry in raw_entries]

    async def clear(self, session_id: str) -> bool:
        """
        Delete a session.

        Args:
            session_id: Session identifier

        Returns:
            bool: True when a key was removed

        Raises:
            SessionStoreError: When Redis is unavailable
        """
        try:
            removed = await self._redis.delete(self._key(session_id))
        except RedisError as e:
            raise SessionStoreError(f"Failed to delete session: {e}", session_id=session_id) from e
        return bool(removed)

    async def refresh_ttl(self, session_id: str, seconds: int | None = None) -> None:
        """
        Reset a session's expiry.

        Args:
            session_id: Session identifier
            seconds: TTL override (defaults to the configured TTL)

        Raises:
            SessionStoreError: When Redis is unavailable
        """
        try:
            await self._redis.expire(self._key(session_id), seconds or self.ttl_seconds)
        except RedisError as e:
            raise SessionStoreError(f"Failed to refresh session TTL: {e}", session_id=session_id) from e

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self._redis.ping())
        except RedisError:
            return False

    async def close(self) -> None:
        """Close the connection pool."""
        await self._redis.aclose()
