"""Configuration management for the Broker Readiness service.

Scoring weights and thresholds are compiled into broker_scoring.core.scoring
and are deliberately not settings.
"""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file (only if accessible)
try:
    load_dotenv()
except (PermissionError, OSError):
    # Environment variables should be set directly
    pass


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    SCORING_ENV: Literal["dev", "test", "staging", "prod"] = Field(
        default="dev", description="Environment: dev, test, staging, prod"
    )

    # Consultant briefing
    INCLUDE_EXPLANATION: bool = Field(
        default=True, description="Attach the rule-based explanation to API responses"
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance

    Raises:
        ValidationError: If an environment variable has an invalid value
    """
    return Settings()
