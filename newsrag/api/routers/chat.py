"""
Chat API endpoint.

Routes:
- POST /chat - Stream an answer as plain text

The first fragment is produced before the response starts so that
validation, embedding, retrieval and early generation failures are
reported as JSON errors with a proper status. Once bytes have been sent,
a failure can only end the body early.

Dependencies: newsrag.application.services.chat_service, newsrag.models
System role: Chat streaming HTTP API
"""

import logging
from contextlib import aclosing

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import StreamingResponse

from newsrag.api.deps import get_chat_service
from newsrag.application.services import ChatService, mint_session_id
from newsrag.core.exceptions import (
    EmbeddingError,
    GenerationError,
    NewsRagException,
    ValidationError,
)
from newsrag.models import ChatRequest, ErrorResponse

logger = logging.getLogger(__name__)

SESSION_HEADER = "X-Session-Id"

EMBEDDING_FAILED_MESSAGE = (
    "Failed to get Jina embeddings. Please check your API key and network connection."
)
GENERATION_FAILED_MESSAGE = (
    "Failed to generate a response. Please check your API keys and configuration."
)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.post(
    "",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Streamed answer"},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)
async def chat(
    request: Request,
    body: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
) -> StreamingResponse:
    """
    Answer a question from the news collection, streamed as plain text.

    Args:
        request: Incoming request (used for disconnect detection)
        body: ChatRequest with query and optional sessionId
        chat_service: Injected ChatService

    Returns:
        StreamingResponse: text/plain body with X-Session-Id header

    Raises:
        HTTPException(400): Missing query
        HTTPException(500): Embedding or retrieval failed
        HTTPException(502): Generation failed before any output
    """
    session_id = body.session_id or mint_session_id()
    stream = chat_service.stream_answer(body.query, session_id)

    first: str | None = None
    try:
        first = await stream.__anext__()
    except StopAsyncIteration:
        pass
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except EmbeddingError as e:
        logger.error(f"{__name__}:chat - Embedding failed: {e}", extra={"session_id": session_id})
        raise HTTPException(status_code=500, detail=EMBEDDING_FAILED_MESSAGE)
    except GenerationError as e:
        logger.error(f"{__name__}:chat - Generation failed before streaming: {e}", extra={"session_id": session_id})
        raise HTTPException(status_code=502, detail=GENERATION_FAILED_MESSAGE)
    except NewsRagException as e:
        logger.error(
            f"{__name__}:chat - Chat request failed: {type(e).__name__}: {e}",
            extra={"session_id": session_id},
        )
        raise HTTPException(status_code=500, detail=GENERATION_FAILED_MESSAGE)

    async def body_stream():
        async with aclosing(stream):
            if first is None:
                return
            yield first
            async for fragment in stream:
                if await request.is_disconnected():
                    logger.info(
                        f"{__name__}:chat - Client disconnected, abandoning stream",
                        extra={"session_id": session_id},
                    )
                    break
                yield fragment

    return StreamingResponse(
        body_stream(),
        media_type="text/plain; charset=utf-8",
        headers={
            SESSION_HEADER: session_id,
            "Cache-Control": "no-cache",
        },
    )
