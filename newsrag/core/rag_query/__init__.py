"""Retrieval-augmented answering: prompt assembly and streamed generation."""

from .generator import GeminiGenerator
from .prompt import FALLBACK_CONTEXT, NEWS_QA_PROMPT, build_context, build_messages

__all__ = [
    "FALLBACK_CONTEXT",
    "GeminiGenerator",
    "NEWS_QA_PROMPT",
    "build_context",
    "build_messages",
]
