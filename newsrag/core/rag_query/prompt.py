"""
News question-answering prompt.

Retrieved passages are joined with blank lines and placed ahead of the
user's question. An empty retrieval is replaced by a fixed notice so the
model answers that nothing relevant was found.

Dependencies: langchain_core.prompts
System role: Prompt template for grounded news answers
"""

from collections.abc import Sequence

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from newsrag.boundary.vdb.vector_schemas import VectorSearchResult

FALLBACK_CONTEXT = (
    "No relevant news articles were found in the database. Please try a different query."
)

PASSAGE_SEPARATOR = "\n\n"

NEWS_PROMPT_TEMPLATE = """Based on the following news articles, answer the user's question.

News Articles:
{context}

User's Question:
{question}"""

NEWS_QA_PROMPT = ChatPromptTemplate.from_messages([
    ("human", NEWS_PROMPT_TEMPLATE),
])


def build_context(results: Sequence[VectorSearchResult]) -> str:
    """
    Join retrieved passages for the prompt.

    Args:
        results: Search results in rank order

    Returns:
        str: Passages separated by a blank line, or FALLBACK_CONTEXT when
        there are none
    """
    passages = [result.payload.text for result in results if result.payload.text]
    if not passages:
        return FALLBACK_CONTEXT
    return PASSAGE_SEPARATOR.join(passages)


def build_messages(context: str, question: str) -> list[BaseMessage]:
    """Render the prompt into chat messages."""
    return NEWS_QA_PROMPT.invoke({"context": context, "question": question}).to_messages()
