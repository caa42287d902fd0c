"""Configuration models and helpers for the filehash tool."""
from __future__ import annotations

import logging
import sys

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Runtime configuration for the digest engine and CLI."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FILEHASH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Digest engine
    chunk_size: int = Field(default=8192, gt=0)

    # Logging
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def configure_logging(level: str = "WARNING") -> None:
    """Send log records to stderr so stdout only carries digest lines."""

    logging.basicConfig(
        level=level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


settings = Settings()
