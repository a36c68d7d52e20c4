"""Core application configuration and settings.

Handles environment variables and logging settings for the meeting model.
"""
import os
import warnings
from pathlib import Path
from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings


# Load environment variables
ROOT = Path(__file__).resolve().parents[2]
load_dotenv(dotenv_path=ROOT / ".env", override=False)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application Settings
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development") == "production",
        alias="LOG_JSON"
    )

    class Config:
        case_sensitive = False
        env_file = ".env"
        populate_by_name = True

    def validate_required_settings(self):
        """Validate that settings hold usable values."""
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL '{self.log_level}' is not one of "
                f"{', '.join(sorted(VALID_LOG_LEVELS))}."
            )


def check_settings(current: Settings) -> None:
    """Validate settings, warning outside production and raising in production."""
    if current.environment == "test":
        return
    try:
        current.validate_required_settings()
    except ValueError as e:
        # Don't raise in development to allow partial setup
        if current.environment == "production":
            raise
        warnings.warn(f"Configuration Error: {e}", RuntimeWarning, stacklevel=2)


# Global settings instance
settings = Settings()
check_settings(settings)
