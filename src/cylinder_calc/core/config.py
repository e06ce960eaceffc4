"""Application configuration.

Environment variables only (prefix `CYLINDER_CALC_`); there is no `.env` or
other config file. The calculation itself has no knobs: the settings only
touch logging and console rendering.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseSettings):
    """Central settings object, read once by the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="CYLINDER_CALC_",
        extra="ignore",
        case_sensitive=False,
    )

    log_level: str = Field(
        default="WARNING",
        description="Level for diagnostic logging on stderr.",
    )
    no_color: bool = Field(
        default=False,
        description="Disable colour in console output.",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)
