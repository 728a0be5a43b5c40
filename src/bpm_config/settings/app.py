"""Application settings powered by Pydantic BaseSettings."""

import logging
import sys
from pathlib import Path
from typing import TextIO

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bpm_config.features.observability.logging import configure_logging


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="BPM_CONFIG_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=True)
    deployments_root: Path | None = Field(default=None)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"Unknown log level: {v}"
            raise ValueError(msg)
        return level

    @property
    def log_level_value(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelNamesMapping()[self.log_level]


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()


def configure_logging_from_settings(
    settings: AppSettings | None = None,
    output: TextIO = sys.stderr,
) -> AppSettings:
    """Apply logging settings.

    Args:
        settings: Settings to apply; loaded from the environment when omitted.
        output: Output stream for log lines.

    Returns:
        The applied settings.
    """
    settings = settings or get_settings()
    configure_logging(
        level=settings.log_level_value,
        output=output,
        json_format=settings.log_json,
    )
    return settings
