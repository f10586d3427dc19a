"""Application settings using pydantic-settings.

Settings are loaded from environment variables with sensible defaults
for development. Production deployments should set the gateway values
explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectorySettings(BaseSettings):
    """User directory gateway settings.

    Environment variables:
        USER_DIRECTORY_GATEWAY: Gateway implementation, http or memory (default: http)
        USER_DIRECTORY_BASE_URL: Remote users service address (default: https://reqres.in/api)
        USER_DIRECTORY_API_KEY: Optional API key sent as x-api-key
        USER_DIRECTORY_TIMEOUT_SECONDS: HTTP request timeout (default: 10.0)
        USER_DIRECTORY_MOCK_LATENCY_SECONDS: Simulated delay of the in-memory gateway (default: 0.0)
        USER_DIRECTORY_NOTIFIER: Notification channel, console or log (default: console)
    """

    model_config = SettingsConfigDict(
        env_prefix="USER_DIRECTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    gateway: Literal["http", "memory"] = Field(
        default="http",
        description="Gateway implementation selected at composition time",
    )
    base_url: str = Field(
        default="https://reqres.in/api",
        description="Base address of the remote users service",
    )
    api_key: SecretStr = Field(
        default=SecretStr(""),
        description="API key sent in the x-api-key header (empty disables it)",
    )
    timeout_seconds: float = Field(
        default=10.0,
        description="HTTP request timeout in seconds",
        gt=0,
        le=300,
    )
    mock_latency_seconds: float = Field(
        default=0.0,
        description="Artificial delay applied by the in-memory gateway",
        ge=0,
        le=10,
    )
    notifier: Literal["console", "log"] = Field(
        default="console",
        description="Where user-facing notifications are delivered",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Require an absolute http(s) address and strip the trailing slash."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got: {value}")
        return value.rstrip("/")


class Settings(BaseSettings):
    """Main application settings aggregating all configuration sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="User Directory", description="Application name")
    debug: bool = Field(default=False, description="Debug mode")

    @property
    def directory(self) -> DirectorySettings:
        """Get directory settings."""
        return get_directory_settings()


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()


@lru_cache
def get_directory_settings() -> DirectorySettings:
    """Get cached directory settings.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return DirectorySettings()
