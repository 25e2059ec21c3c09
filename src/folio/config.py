"""Environment-based configuration."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings

from folio.browser.locations import (
    FixedLocationProvider,
    HomeLocationProvider,
    LocationProvider,
)
from folio.constants import LOG_LEVELS

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Browsing
    default_directory: str = ""  # empty = Path.home(), "/" fallback

    # Logging
    log_level: str = "INFO"
    debug_mode: bool = False

    # API
    api_key: str = ""
    cors_origins: str = "http://localhost:1420"
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}"
            )
        return level

    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug_mode is on, otherwise log_level."""
        return "DEBUG" if self.debug_mode else self.log_level

    @property
    def cors_origin_list(self) -> list[str]:
        """Comma-separated cors_origins as a list."""
        return [
            o.strip() for o in self.cors_origins.split(",") if o.strip()
        ]

    def location_provider(self) -> LocationProvider:
        """Provider for the directory listed when no path is given."""
        if self.default_directory:
            logger.debug(
                "event=default_directory_pinned directory=%s",
                self.default_directory,
            )
            return FixedLocationProvider(self.default_directory)
        return HomeLocationProvider()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
