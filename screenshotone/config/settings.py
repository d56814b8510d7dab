"""
Client Settings
===============

Credentials, transport and logging configuration using Pydantic Settings.
Values are read from ``SCREENSHOTONE_*`` environment variables or a ``.env`` file.
"""

from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.screenshotone.com"


class Settings(BaseSettings):
    """ScreenshotOne client settings with environment variable support."""

    # Credentials
    access_key: Optional[str] = Field(default=None, description="API access key")
    secret_key: Optional[str] = Field(
        default=None, description="API secret key used to sign request URLs"
    )

    # API Configuration
    base_url: str = Field(default=DEFAULT_BASE_URL, description="API base endpoint")

    # Transport Configuration
    request_timeout: float = Field(
        default=60.0, gt=0, description="Total request timeout in seconds"
    )
    connect_timeout: float = Field(
        default=10.0, gt=0, description="Connection timeout in seconds"
    )

    # Logging Configuration
    environment: str = Field(
        default="development", description="Environment: development, testing, production"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        allowed = {"development", "testing", "production"}
        if v not in allowed:
            raise ValueError(f"Environment must be one of: {allowed}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of: {allowed}")
        return v.upper()

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, env_prefix="SCREENSHOTONE_"
    )


# Global settings instance - will be initialized when needed
settings = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global settings
    if settings is None:
        settings = Settings()
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings
