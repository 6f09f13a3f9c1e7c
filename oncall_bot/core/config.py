"""Application configuration using Pydantic settings."""
from __future__ import annotations

import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for one notify/rotate invocation.

    Slack credentials are optional here: ``rotate`` never talks to Slack, so
    the token and channel are only checked when a notification is sent.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    SLACK_BOT_TOKEN: str = ""
    SLACK_CHANNEL: str = ""
    SLACK_TIMEOUT: int = Field(default=30, gt=0)

    QUEUE_FILE: Path = Path("queue")
    CURRENT_FILE: Path = Path("current")

    LOG_LEVEL: str = "INFO"

    @field_validator("SLACK_BOT_TOKEN", "SLACK_CHANNEL", mode="before")
    @classmethod
    def strip_blank(cls, value: object) -> object:
        """Treat whitespace-only values the same as unset ones."""

        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, value: object) -> object:
        """Accept any case and reject names the logging module does not know."""

        if not isinstance(value, str):
            return value
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return level
