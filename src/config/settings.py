import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Sleeper API Configuration
    sleeper_api_base_url: str = Field(
        "https://api.sleeper.app/v1", description="Base URL for the Sleeper API."
    )
    request_timeout: float = Field(
        30.0, gt=0, description="HTTP timeout in seconds for Sleeper requests."
    )
    max_attempts: int = Field(
        4,
        ge=1,
        description="Total attempts per request (first try included) before giving up.",
    )

    # League Selection
    league_id: Optional[str] = Field(
        None, description="Sleeper league identifier to transform."
    )
    sport: str = Field(
        "nfl", description="Sport code used to fetch the player directory."
    )

    # Output
    output_file: str = Field(
        "league.json", description="Where the normalized league JSON is written."
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
