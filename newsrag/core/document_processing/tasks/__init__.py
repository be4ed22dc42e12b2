"""
Ingestion pipeline tasks.

Exports: SitemapSource, ArticleFetcher, ChunkingTask, VectorStoreTask
"""

from .article_task import ArticleFetcher
from .chunking_task import ChunkingTask, chunk_text
from .sitemap_task import SitemapSource
from .vector_store_task import VectorStoreTask

__all__ = [
    "ArticleFetcher",
    "ChunkingTask",
    "SitemapSource",
    "VectorStoreTask",
    "chunk_text",
]
