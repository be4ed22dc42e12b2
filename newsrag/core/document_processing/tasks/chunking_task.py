"""
Sentence-packing text chunker.

Splits article text on sentence boundaries and greedily packs sentences
into chunks of at most ``max_chars`` characters.

Dependencies: re (stdlib)
System role: Second stage of the ingestion pipeline
"""

import re

SENTENCE_BOUNDARY = re.compile(r"(?<=[.?!])\s+")


def split_sentences(text: str) -> list[str]:
    """Split text on whitespace that follows '.', '?' or '!'."""
    return [sentence for sentence in SENTENCE_BOUNDARY.split(text) if sentence.strip()]


def chunk_text(text: str, max_chars: int = 500) -> list[str]:
    """
    Pack sentences into chunks bounded by ``max_chars``.

    A sentence longer than ``max_chars`` is emitted whole as its own chunk;
    the bound is advisory for such sentences.

    Args:
        text: Article text
        max_chars: Soft upper bound on chunk length

    Returns:
        list[str]: Ordered chunks; joining them with single spaces reproduces
        the sentence sequence

    Raises:
        ValueError: When max_chars is not positive
    """
    if max_chars <= 0:
        raise ValueError("max_chars must be positive")

    chunks: list[str] = []
    current = ""
    for sentence in split_sentences(text):
        separator = 1 if current else 0
        if len(current) + separator + len(sentence) <= max_chars:
            current = f"{current} {sentence}" if current else sentence
        else:
            if current:
                chunks.append(current)
            current = sentence
    if current:
        chunks.append(current)
    return chunks


class ChunkingTask:
    """Split article text into sentence-aligned chunks."""

    def __init__(self, max_chars: int = 500) -> None:
        """
        Initialize chunking task.

        Args:
            max_chars: Soft upper bound on chunk length in characters

        Raises:
            ValueError: When max_chars is not positive
        """
        if max_chars <= 0:
            raise ValueError("max_chars must be positive")
        self.max_chars = max_chars

    def chunk(self, text: str) -> list[str]:
        """
        Split text into chunks.

        Args:
            text: Article text

        Returns:
            list[str]: Ordered chunks (empty for blank text)
        """
        return chunk_text(text, self.max_chars)
