"""
Article ingestion pipeline.

Sitemap acquisition, article fetching, sentence chunking, embedding and
Qdrant upload, orchestrated by IngestionPipeline in entrypoint.py.
"""
