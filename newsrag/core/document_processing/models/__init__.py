"""
Models for the ingestion pipeline.

Exports: ChunkPoint, IngestionResult
"""

from .chunk import ChunkPoint
from .pipeline_result import IngestionResult

__all__ = ["ChunkPoint", "IngestionResult"]
