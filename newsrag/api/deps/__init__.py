"""FastAPI dependencies."""

from .dependencies import (
    ServiceContainer,
    get_chat_service,
    get_container,
    get_session_service,
)

__all__ = ["ServiceContainer", "get_chat_service", "get_container", "get_session_service"]
