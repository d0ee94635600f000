"""Configuration management for ExposureEngine."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Sandboxed environments may block .env; variables are then set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    EXPOSURE_ENGINE_ENV: str = Field(
        default="dev", description="Environment: dev, staging, prod, test"
    )

    # Anthropic configuration (optional: scoring works without it)
    ANTHROPIC_API_KEY: str | None = Field(
        default=None, description="Anthropic API key for narrative generation"
    )

    # Narrative generation
    NARRATIVE_MODEL: str = Field(
        default="claude-sonnet-4-20250514", description="Model for narrative generation"
    )
    NARRATIVE_MAX_TOKENS: int = Field(
        default=4096, description="Max output tokens for a narrative response"
    )
    NARRATIVE_TEMPERATURE: float = Field(
        default=0.7, ge=0.0, le=1.0, description="Sampling temperature for narratives"
    )
    NARRATIVE_PROMPT_VERSION: str = Field(
        default="narrative_v1", description="Narrative prompt version for tracking"
    )

    # Logging
    LOG_LEVEL: str | None = Field(
        default=None, description="Override log level (DEBUG, INFO, WARNING, ...)"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance
    """
    return Settings()
