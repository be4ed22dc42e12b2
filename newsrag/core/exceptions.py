"""
Exception hierarchy for the News RAG application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class NewsRagException(Exception):
    """Base exception for all News RAG application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging

        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(NewsRagException):
    """Raised at startup when required configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        missing: list[str] | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            missing: Human-readable list of offending variables
            details: Additional context
        """
        details = details or {}
        if missing:
            details["missing"] = missing
        super().__init__(message, details)


class ValidationError(NewsRagException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class SetupError(NewsRagException):
    """Raised when the collection cannot be (re)created; fatal to an ingestion run."""

    def __init__(
        self,
        message: str,
        collection: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize setup error.

        Args:
            message: Error message
            collection: Collection that failed to be created
            details: Additional context
        """
        details = details or {}
        if collection:
            details["collection"] = collection
        super().__init__(message, details)


class DocumentProcessingError(NewsRagException):
    """Base exception for per-document ingestion errors."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document processing error.

        Args:
            message: Error message
            url: URL of the document that failed
            details: Additional context
        """
        details = details or {}
        if url:
            details["url"] = url
        super().__init__(message, details)


class SourceFetchError(DocumentProcessingError):
    """Raised when a sitemap or article cannot be fetched or rendered."""

    pass


class EmbeddingError(DocumentProcessingError):
    """Raised when embedding generation fails."""

    pass


class VectorStoreError(NewsRagException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (reset, upsert, search)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class GenerationError(NewsRagException):
    """Raised when the generation service fails before or during streaming."""

    def __init__(
        self,
        message: str,
        fragments_sent: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            fragments_sent: Number of fragments already delivered to the client
            details: Additional context
        """
        details = details or {}
        details["fragments_sent"] = fragments_sent
        self.fragments_sent = fragments_sent
        super().__init__(message, details)


class SessionStoreError(NewsRagException):
    """Raised when the session store (Redis) operation fails."""

    def __init__(
        self,
        message: str,
        session_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize session store error.

        Args:
            message: Error message
            session_id: Session the operation targeted
            details: Additional context
        """
        details = details or {}
        if session_id:
            details["session_id"] = session_id
        super().__init__(message, details)
