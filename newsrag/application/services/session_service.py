"""
Session service orchestrator.

Reads and deletes conversation logs on behalf of the history endpoints.

Dependencies: newsrag.boundary.cache
System role: Session use case orchestration
"""

from newsrag.boundary.cache import RedisSessionStore
from newsrag.core.exceptions import ValidationError


class SessionService:
    """Session service orchestrator."""

    def __init__(self, session_store: RedisSessionStore) -> None:
        self.session_store = session_store

    async def get_history(self, session_id: str | None) -> list[dict]:
        """
        Get the full conversation log.

        Args:
            session_id: Session identifier

        Returns:
            list[dict]: Turns in write order; empty for unknown sessions

        Raises:
            ValidationError: If session_id is missing
            SessionStoreError: If Redis is unavailable
        """
        if not session_id:
            raise ValidationError("Session ID is required.", field="sessionId")
        return await self.session_store.list_all(session_id)

    async def clear_session(self, session_id: str | None) -> str:
        """
        Delete a session's log.

        Returns:
            str: Confirmation message

        Raises:
            ValidationError: If session_id is missing
            SessionStoreError: If Redis is unavailable
        """
        if not session_id:
            raise ValidationError("Session ID is required.", field="sessionId")
        await self.session_store.clear(session_id)
        return f"Session {session_id} deleted successfully."
