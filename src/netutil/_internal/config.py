"""Environment-backed settings for netutil.

The library functions never read these; only the CLI and logging setup do.

Example environment variables:
    NETUTIL_LOG_LEVEL=DEBUG
    NETUTIL_WAIT_TIMEOUT=5
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings for the netutil CLI and logging."""

    model_config = SettingsConfigDict(env_prefix="NETUTIL_", extra="ignore")

    log_level: str = "INFO"
    """Level for the ``netutil`` logger."""

    log_file: str | None = None
    """Optional file to mirror log records into."""

    wait_timeout: float = Field(default=30.0, ge=0)
    """Default seconds the ``wait`` command polls before giving up."""

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load and cache validated settings from the environment."""
    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid netutil settings: {exc}") from exc
