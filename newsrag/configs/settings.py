"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides a cached factory for FastAPI and a fail-fast loader that turns
missing environment variables into a readable diagnostic.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache
from typing import TypeVar

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings as PydanticBaseSettings

from newsrag.configs.base import BaseSettings
from newsrag.configs.embedding import EmbeddingSettings
from newsrag.configs.generation import GenerationSettings
from newsrag.configs.session_store import SessionStoreSettings
from newsrag.configs.vector_store import VectorStoreSettings
from newsrag.core.document_processing.configs import IngestionSettings
from newsrag.core.exceptions import ConfigurationError

SettingsT = TypeVar("SettingsT", bound=PydanticBaseSettings)

# Field name -> environment variable prefix, used for diagnostics only
_ENV_PREFIXES = {
    VectorStoreSettings: "QDRANT_",
    GenerationSettings: "GEMINI_",
    SessionStoreSettings: "REDIS_",
    IngestionSettings: "INGEST_",
    EmbeddingSettings: "",
}


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    embedding: EmbeddingSettings = Field(default_factory=EmbeddingSettings)
    generation: GenerationSettings = Field(default_factory=GenerationSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    session_store: SessionStoreSettings = Field(default_factory=SessionStoreSettings)
    ingestion: IngestionSettings = Field(default_factory=IngestionSettings)


def _describe(exc: ValidationError, prefix: str) -> list[str]:
    """Render pydantic validation errors as environment variable messages."""
    problems = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "__root__"]
        if error.get("type") == "missing" and location:
            problems.append(f"{prefix}{location[-1]}".upper() + " is not set")
        else:
            where = f"{prefix}{location[-1]}".upper() + ": " if location else ""
            problems.append(f"{where}{error.get('msg', 'invalid value')}")
    return problems


def load_section(settings_cls: type[SettingsT]) -> SettingsT:
    """
    Load a single settings class from the environment.

    Args:
        settings_cls: Settings class to instantiate

    Returns:
        SettingsT: Loaded settings

    Raises:
        ConfigurationError: If required variables are missing or invalid
    """
    try:
        return settings_cls()
    except ValidationError as e:
        problems = _describe(e, _ENV_PREFIXES.get(settings_cls, ""))
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems),
            missing=problems,
        ) from e


def load_settings() -> Settings:
    """
    Load every settings section, collecting all problems before failing.

    Returns:
        Settings: Fully validated application settings

    Raises:
        ConfigurationError: Listing every missing or invalid variable
    """
    sections = {}
    problems: list[str] = []
    for name, settings_cls in (
        ("embedding", EmbeddingSettings),
        ("generation", GenerationSettings),
        ("vector_store", VectorStoreSettings),
        ("session_store", SessionStoreSettings),
        ("ingestion", IngestionSettings),
    ):
        try:
            sections[name] = load_section(settings_cls)
        except ConfigurationError as e:
            problems.extend(e.details.get("missing", []))

    if problems:
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(problems),
            missing=problems,
        )
    return Settings(**sections)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        ConfigurationError: If required variables are missing

    Usage:
        from newsrag.configs import get_settings
        settings = get_settings()
    """
    return load_settings()
