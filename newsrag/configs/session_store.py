"""
Session store configuration settings.

Manages Redis connection parameters and the conversation TTL.

Dependencies: pydantic, pydantic_settings
System role: Chat session storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SessionStoreSettings(BaseSettings):
    """Redis session store configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REDIS_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(description="Redis connection URL (redis://host:port/db)")
    password: str | None = Field(default=None, description="Redis password")
    session_ttl_seconds: int = Field(
        default=3600,
        description="Seconds an idle session survives after its last write",
        gt=0,
    )
    key_prefix: str = Field(default="session:", description="Key prefix for session lists")
