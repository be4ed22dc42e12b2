"""
Session API endpoints.

Routes:
- GET /chat/history?sessionId= - Full conversation log
- DELETE /chat/session/{session_id} - Delete a session
- POST /chat/clear - Delete a session (id in body)

Dependencies: newsrag.application.services.session_service, newsrag.models
System role: Session management HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from newsrag.api.deps import get_session_service
from newsrag.application.services import SessionService
from newsrag.core.exceptions import SessionStoreError, ValidationError
from newsrag.models import (
    ClearSessionRequest,
    ErrorResponse,
    HistoryResponse,
    MessageResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["sessions"])

ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/history", response_model=HistoryResponse, responses=ERROR_RESPONSES)
async def get_chat_history(
    session_id: str | None = Query(default=None, alias="sessionId"),
    session_service: SessionService = Depends(get_session_service),
) -> HistoryResponse:
    """
    Get the conversation log of a session.

    Args:
        session_id: Session identifier (query parameter sessionId)
        session_service: Injected SessionService

    Returns:
        HistoryResponse: Turns in write order; empty for unknown sessions

    Raises:
        HTTPException(400): Missing session id
        HTTPException(500): Session store unavailable
    """
    try:
        history = await session_service.get_history(session_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SessionStoreError as e:
        logger.error(f"{__name__}:get_chat_history - Error fetching chat history: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve chat history.")
    return HistoryResponse(history=history)


async def _clear(session_service: SessionService, session_id: str | None) -> MessageResponse:
    try:
        message = await session_service.clear_session(session_id)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SessionStoreError as e:
        logger.error(f"{__name__}:clear_session - Error deleting session: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete session.")
    return MessageResponse(message=message)


@router.delete("/session/{session_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def delete_session(
    session_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """Delete a session by id."""
    return await _clear(session_service, session_id)


@router.post("/clear", response_model=MessageResponse, responses=ERROR_RESPONSES)
async def clear_session(
    body: ClearSessionRequest,
    session_service: SessionService = Depends(get_session_service),
) -> MessageResponse:
    """Delete the session named in the request body."""
    return await _clear(session_service, body.session_id)
