"""
Health check API endpoints.

Routes: GET /health, GET /health/dependencies

Dependencies: newsrag.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from newsrag.api.deps import ServiceContainer, get_container
from newsrag.core.exceptions import VectorStoreError


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class DependencyHealthResponse(BaseModel):
    status: str
    redis: bool
    qdrant: bool
    points: int | None = None


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/dependencies", response_model=DependencyHealthResponse)
async def health_check_dependencies(
    container: ServiceContainer = Depends(get_container),
):
    """
    Ping Redis and check the Qdrant collection.

    Returns 503 when Redis or Qdrant is unreachable. A missing collection
    (not yet ingested) is reported with ``points`` left empty.
    """
    redis_ok = await container.session_store.ping()
    points = None
    try:
        if await run_in_threadpool(container.vector_store.collection_exists):
            points = await run_in_threadpool(container.vector_store.count)
        qdrant_ok = True
    except VectorStoreError:
        qdrant_ok = False

    healthy = redis_ok and qdrant_ok
    payload = DependencyHealthResponse(
        status="healthy" if healthy else "degraded",
        redis=redis_ok,
        qdrant=qdrant_ok,
        points=points,
    )
    return JSONResponse(status_code=200 if healthy else 503, content=payload.model_dump())
