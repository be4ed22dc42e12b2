"""
External service boundary.

Adapters for the embedding service, Qdrant and Redis.
"""
