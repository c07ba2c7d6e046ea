import os
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def _should_load_env_file() -> str | None:
    """Determine if .env should be loaded.

    Do NOT auto-load `.env` when running under pytest or in CI, so tests
    always start from the documented defaults.
    """
    if any("pytest" in str(x) for x in sys.argv if x):
        return None
    if os.environ.get("CI") in ("1", "true", "True"):
        return None
    return ".env"


class Settings(BaseSettings):
    # Process-wide validation switch
    VALIDATE_DURING_CREATION: bool = Field(
        default=False,
        description="Validate format and length in Extend/Spin and GUID conversion",
    )

    # Environment configuration
    ENVIRONMENT: str = Field(
        default="development",
        description="Environment: 'development', 'staging', or 'production'",
    )

    # Logging
    LOG_LEVEL: str | None = Field(
        default=None,
        description="Minimum log level. Defaults to DEBUG in development, INFO otherwise",
    )
    LOG_FILE: str | None = Field(
        default=None,
        description="Optional path of a rotating log file",
    )
    LOG_ROTATION: str = Field(
        default="10 MB",
        description="Rotation policy for the log file",
    )
    LOG_RETENTION: str = Field(
        default="7 days",
        description="Retention policy for rotated log files",
    )

    def get_log_level(self) -> str:
        """Determine log level from config or environment."""
        if self.LOG_LEVEL:
            return self.LOG_LEVEL
        if self.ENVIRONMENT == "development":
            return "DEBUG"
        return "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str | None:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.strip().upper() or None
        return v

    model_config = SettingsConfigDict(
        env_prefix="CV_",
        env_file=_should_load_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the settings instance (for dependency injection)."""
    return settings
