"""
Embedding client contract.

Dependencies: typing (stdlib)
System role: Interface shared by embedding providers
"""

from typing import Protocol


class EmbeddingClient(Protocol):
    """
    Batch text embedder.

    ``embed`` returns one vector per input text in input order, or an empty
    list when the whole batch failed. Empty input returns an empty list
    without a network call.
    """

    dimension: int

    def embed(self, texts: list[str]) -> list[list[float]]:
        ...

    def embed_query(self, text: str) -> list[float] | None:
        ...
