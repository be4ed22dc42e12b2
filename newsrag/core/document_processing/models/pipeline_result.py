"""
Ingestion run result model.

Dependencies: pydantic
System role: Return type for IngestionPipeline.run()
"""

from pydantic import BaseModel, Field


class IngestionResult(BaseModel):
    """Outcome of a single ingestion run."""

    collection: str = Field(description="Collection that was rebuilt")
    articles_processed: int = Field(default=0, description="Articles chunked, embedded and upserted")
    articles_skipped: int = Field(default=0, description="Articles skipped (fetch, embed or upsert failure)")
    chunks_upserted: int = Field(default=0, description="Total points written")
    processing_time_ms: float = Field(default=0.0, description="Wall-clock duration of the run")
