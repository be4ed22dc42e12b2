"""Core domain: exceptions, ingestion pipeline, RAG query building blocks."""
