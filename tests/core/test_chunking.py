"""
Test suite for the sentence-packing chunker.

System role: Verification of chunk boundaries and length bounds
"""

import pytest

from newsrag.core.document_processing.tasks import ChunkingTask, chunk_text
from newsrag.core.document_processing.tasks.chunking_task import split_sentences


def _sentence(length: int, end: str = ".") -> str:
    """Build a sentence of exactly ``length`` characters."""
    return "a" * (length - 1) + end


class TestSplitSentences:
    """Test suite for sentence splitting."""

    def test_split_should_break_after_terminal_punctuation(self) -> None:
        assert split_sentences("One. Two? Three! Four") == ["One.", "Two?", "Three!", "Four"]

    def test_split_should_not_break_inside_words(self) -> None:
        assert split_sentences("Version 2.5 shipped. Done.") == ["Version 2.5 shipped.", "Done."]

    def test_split_should_drop_blank_input(self) -> None:
        assert split_sentences("   ") == []


class TestChunkText:
    """Test suite for chunk_text."""

    def test_three_sentences_of_650_chars_should_make_two_chunks(self) -> None:
        """Sentences of 200, 200 and 248 chars with max 500 pack as [s1 s2] [s3]."""
        # Arrange
        s1, s2, s3 = _sentence(200), _sentence(200), _sentence(248)
        text = f"{s1} {s2} {s3}"
        assert len(text) == 650

        # Act
        chunks = chunk_text(text, max_chars=500)

        # Assert
        assert chunks == [f"{s1} {s2}", s3]

    def test_chunks_should_respect_max_chars(self) -> None:
        text = " ".join(_sentence(n) for n in (120, 90, 300, 45, 260, 499, 10))

        chunks = chunk_text(text, max_chars=500)

        assert all(len(chunk) <= 500 for chunk in chunks)

    def test_joined_chunks_should_reproduce_sentence_sequence(self) -> None:
        sentences = [_sentence(n) for n in (120, 90, 300, 45, 260)]

        chunks = chunk_text(" ".join(sentences), max_chars=300)

        assert " ".join(chunks).split(" ") == " ".join(sentences).split(" ")

    def test_oversized_sentence_should_be_its_own_chunk(self) -> None:
        long_sentence = _sentence(800)

        chunks = chunk_text(f"Short one. {long_sentence} Tail.", max_chars=500)

        assert chunks == ["Short one.", long_sentence, "Tail."]

    def test_text_without_punctuation_should_be_one_chunk(self) -> None:
        assert chunk_text("no terminal punctuation here", max_chars=500) == [
            "no terminal punctuation here"
        ]

    def test_empty_text_should_yield_no_chunks(self) -> None:
        assert chunk_text("", max_chars=500) == []

    def test_non_positive_max_chars_should_raise(self) -> None:
        with pytest.raises(ValueError):
            chunk_text("Anything.", max_chars=0)


class TestChunkingTask:
    """Test suite for ChunkingTask."""

    def test_chunk_should_use_configured_bound(self) -> None:
        task = ChunkingTask(max_chars=10)

        assert task.chunk("Alpha one. Beta two.") == ["Alpha one.", "Beta two."]

    def test_init_should_reject_invalid_bound(self) -> None:
        with pytest.raises(ValueError):
            ChunkingTask(max_chars=-1)
