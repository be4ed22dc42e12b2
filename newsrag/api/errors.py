"""
Exception handlers rendering every error as ``{"error": message}``.

Dependencies: fastapi, starlette
System role: Uniform JSON error contract
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from newsrag.core.exceptions import NewsRagException, ValidationError

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies are client errors (400), not FastAPI's default 422."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"Invalid request: {location} {first.get('msg', '')}".strip() if location else "Invalid request body."
    return JSONResponse(status_code=400, content={"error": message})


async def domain_exception_handler(request: Request, exc: NewsRagException) -> JSONResponse:
    """Fallback for domain errors a route did not translate."""
    if isinstance(exc, ValidationError):
        return JSONResponse(status_code=400, content={"error": exc.message})
    logger.error(
        f"{__name__}:domain_exception_handler - Unhandled {type(exc).__name__}: {exc}",
        extra={"path": request.url.path},
    )
    return JSONResponse(status_code=500, content={"error": "Internal server error."})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(NewsRagException, domain_exception_handler)
