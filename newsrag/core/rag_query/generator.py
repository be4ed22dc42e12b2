"""
Streaming answer generator backed by Gemini.

Dependencies: langchain_google_genai
System role: Token stream source for the chat endpoint
"""

import logging
from collections.abc import AsyncIterator

from langchain_core.messages import BaseMessage
from langchain_google_genai import ChatGoogleGenerativeAI

logger = logging.getLogger(__name__)


def _content_to_text(content) -> str:
    """Flatten chunk content, which may be a string or a list of parts."""
    if isinstance(content, list):
        return "".join(
            item if isinstance(item, str) else (item.get("text", "") if isinstance(item, dict) else str(item))
            for item in content
        )
    return str(content)


class GeminiGenerator:
    """Thin wrapper over ChatGoogleGenerativeAI.astream yielding plain text."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-1.5-flash",
        temperature: float = 0.3,
        llm: ChatGoogleGenerativeAI | None = None,
    ) -> None:
        """
        Initialize generator.

        Args:
            api_key: Google API key
            model: Gemini model ID
            temperature: Sampling temperature
            llm: Pre-built chat model (tests)
        """
        self.model = model
        self._llm = llm or ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=temperature,
        )

    async def stream(self, messages: list[BaseMessage]) -> AsyncIterator[str]:
        """
        Stream answer fragments.

        Args:
            messages: Rendered prompt messages

        Yields:
            str: Non-empty text fragments in arrival order
        """
        logger.info(f"{__name__}:stream - Starting LLM stream (model={self.model})")
        async for chunk in self._llm.astream(messages):
            if not chunk.content:
                continue
            text = _content_to_text(chunk.content)
            if text:
                yield text
