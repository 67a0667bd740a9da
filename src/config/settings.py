"""Environment configuration and validation for the command-line exporter.

This module defines strongly-typed settings loaded from environment variables (optionally via a
local `.env` file). The parsing core takes no configuration; only the CLI reads these settings.
"""

from __future__ import annotations

import codecs
import logging
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

OutputFormat = Literal["graph", "flat", "listing"]


class Settings(BaseSettings):
    """CLI settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    output_format: OutputFormat = Field(default="graph", alias="UVCI_OUTPUT_FORMAT")
    output_encoding: str = Field(default="utf-8", alias="UVCI_OUTPUT_ENCODING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that the level is one of the standard `logging` level names."""

        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {value!r}")
        return level

    @field_validator("output_encoding")
    @classmethod
    def validate_output_encoding(cls, value: str) -> str:
        """Validate that the output encoding is known to the codec registry.

        Graph output contains non-ASCII issuer names, so a wrong codec must fail at startup rather
        than halfway through writing.
        """

        try:
            return codecs.lookup(value).name
        except LookupError as exc:
            raise ValueError(f"unknown UVCI_OUTPUT_ENCODING {value!r}") from exc


def load_settings() -> Settings:
    """Load and validate settings from environment variables.

    Raises:
        RuntimeError: If the environment configuration is invalid.
    """

    try:
        return Settings()
    except ValidationError as exc:
        raise RuntimeError(f"Invalid environment configuration: {exc}") from exc
