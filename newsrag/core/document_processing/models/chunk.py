"""
Chunk point model for the ingestion pipeline.

Represents one embedded article chunk ready for upload to Qdrant.

Dependencies: pydantic
System role: Data structure for chunk points in the ingestion pipeline
"""

from pydantic import BaseModel, Field


class ChunkPoint(BaseModel):
    """Embedded article chunk with its point identifier."""

    id: str | int = Field(description="Point identifier (UUIDv5 string or random int)")
    url: str = Field(description="Source article URL")
    text: str = Field(min_length=1, description="Chunk text content")
    vector: list[float] = Field(description="Embedding vector")

    @property
    def payload(self) -> dict[str, str]:
        """Qdrant payload stored alongside the vector."""
        return {"url": self.url, "text": self.text}
