"""Application configuration management."""

import logging
from functools import lru_cache

from pydantic import ConfigDict, Field
from pydantic import ValidationError as SettingsValidationError
from pydantic_settings import BaseSettings

from app.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Resend
    resend_api_key: str | None = None
    resend_base_url: str = "https://api.resend.com"
    resend_timeout: float = Field(default=30.0, gt=0)

    # Inbox that receives applications and contact messages
    contact_to: str | None = None

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """FastAPI dependency returning the process settings.

    Invalid environment values raise ConfigurationError.
    """
    try:
        return Settings()
    except SettingsValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise ConfigurationError(f"invalid settings: {e.error_count()} error(s)") from e
