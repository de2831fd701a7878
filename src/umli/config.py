"""Settings for the command line tool, from environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .theme import THEMES


class Settings(BaseSettings):
    log_level: str = "WARNING"
    # Named palette from theme.THEMES, None for the default colors
    theme: str | None = None
    font: str = "Inter"
    transparent: bool = False
    # Rendered SVG width in px, None keeps the working width
    output_width: float | None = None

    model_config = SettingsConfigDict(
        env_prefix="UMLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return level

    @field_validator("theme")
    @classmethod
    def _known_theme(cls, value: str | None) -> str | None:
        if value is not None and value not in THEMES:
            raise ValueError(f"unknown theme: {value}")
        return value
