"""
Vector database schemas.

Pydantic models for search results returned by the vector store.

Dependencies: pydantic
System role: Type definitions for vector operations
"""

from pydantic import BaseModel, Field


class ChunkPayload(BaseModel):
    """Payload stored with each point."""

    url: str = Field(default="", description="Source article URL")
    text: str = Field(default="", description="Chunk text content")


class VectorSearchResult(BaseModel):
    """Single result from vector search."""

    point_id: str = Field(description="Point identifier")
    score: float = Field(description="Cosine similarity score")
    payload: ChunkPayload = Field(description="Stored chunk payload")
