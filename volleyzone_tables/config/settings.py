import logging
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from volleyzone_tables.models.division import DEFAULT_DIVISIONS, Division
from volleyzone_tables.models.fetch_request import DEFAULT_PAGE_TITLE

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Upstream endpoint
    table_url: str = Field(
        "https://competitions.volleyzone.co.uk/wp-admin/admin-ajax.php",
        description="Volleyzone AJAX endpoint serving the standings tables.",
    )
    table_action: str = Field(
        "fetch_table_by_competition",
        description="Value of the 'action' query parameter.",
    )
    page_title: str = Field(
        DEFAULT_PAGE_TITLE, description="pageTitle form field sent with each request."
    )
    request_timeout: Optional[float] = Field(
        None,
        gt=0,
        description="HTTP timeout in seconds. None keeps the httpx client default.",
    )

    # Divisions to export, in processing order (JSON list when set from env)
    divisions: List[Division] = Field(
        default_factory=lambda: list(DEFAULT_DIVISIONS),
        description="Ordered (label, competition_id) pairs to export.",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_prefix="VOLLEYZONE_",
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
        if log_level_upper not in VALID_LOG_LEVELS:
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
