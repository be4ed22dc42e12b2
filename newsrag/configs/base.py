"""
Server-level settings shared by the API process.

Reads HOST, PORT, LOG_LEVEL and ENVIRONMENT (no prefix) from the process
environment or a local .env file. Concern-specific sections subclass
pydantic-settings directly with their own prefixes.

Dependencies: pydantic_settings
System role: Root of the settings tree
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class BaseSettings(PydanticBaseSettings):
    """Listen address, log verbosity and deployment label."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(default="development", description="Deployment label used in logs")
    log_level: str = Field(default="INFO", description="Root log level")
    host: str = Field(default="0.0.0.0", description="HTTP listen host")
    port: int = Field(default=3000, description="HTTP listen port", ge=1, le=65535)

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level
