"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    DEBUG: bool = False

    # Database
    DATABASE_URL: str = "sqlite:///./identity.db"

    # Password credentials
    BCRYPT_ROUNDS: int = Field(default=12, ge=4, le=31)
    PASSWORD_COMPARE_POLICY: Literal["first_match", "all_slots"] = "first_match"

    # One-time codes: steps accepted either side of the current one
    TOTP_VALID_WINDOW: int = Field(default=1, ge=0)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
