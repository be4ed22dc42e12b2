"""
Service index.

Routes: GET /

Dependencies: fastapi
System role: Capability listing for clients and probes
"""

from fastapi import APIRouter

router = APIRouter(tags=["root"])

WELCOME_MESSAGE = (
    "Welcome to the RAG News Chatbot API! This service is running and ready to handle requests."
)


@router.get("/")
async def index() -> dict:
    """List the public endpoints."""
    return {
        "message": WELCOME_MESSAGE,
        "endpoints": {
            "chat": "POST /chat",
            "history": "GET /chat/history",
            "clear_session": "DELETE /chat/session/:sessionId",
        },
    }
