"""API request/response models."""

from .chat import (
    ChatRequest,
    ClearSessionRequest,
    ErrorResponse,
    HistoryResponse,
    MessageResponse,
)
from .session import make_turn

__all__ = [
    "ChatRequest",
    "ClearSessionRequest",
    "ErrorResponse",
    "HistoryResponse",
    "MessageResponse",
    "make_turn",
]
