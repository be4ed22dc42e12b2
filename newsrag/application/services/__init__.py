"""Application services."""

from .chat_service import ChatService, mint_session_id
from .session_service import SessionService

__all__ = ["ChatService", "SessionService", "mint_session_id"]
