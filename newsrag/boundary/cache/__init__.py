"""Session store boundary (Redis)."""

from .redis_session_store import RedisSessionStore

__all__ = ["RedisSessionStore"]
