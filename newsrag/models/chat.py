"""
Chat API schemas.

Request/response contracts for the chat, history and session endpoints.
Field names follow the public JSON contract (camelCase ``sessionId``).

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatRequest(BaseModel):
    """Body of POST /chat."""

    model_config = ConfigDict(populate_by_name=True)

    query: str | None = Field(default=None, description="User question")
    session_id: str | None = Field(
        default=None,
        alias="sessionId",
        description="Existing session to continue; a new one is minted when absent",
    )


class ClearSessionRequest(BaseModel):
    """Body of POST /chat/clear."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(default=None, alias="sessionId")


class HistoryResponse(BaseModel):
    """Full session log in write order."""

    history: list[dict[str, str]]


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    """Error body returned by every failing endpoint."""

    error: str = Field(description="Error message")
