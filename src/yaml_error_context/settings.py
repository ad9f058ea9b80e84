"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from yaml_error_context.parser.markers import MarkerFormatRegistry


class Settings(BaseSettings):
    """Configuration for yaml-error-context.

    Values are read from ``YAML_ERROR_CONTEXT_*`` environment variables and
    from a ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="YAML_ERROR_CONTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Marker format used for plain error strings (see MarkerFormatRegistry).
    marker_format: str = "serde_yaml"

    @field_validator("marker_format")
    @classmethod
    def _known_marker_format(cls, value: str) -> str:
        # UnsupportedMarkerFormatError is a ValueError, so pydantic reports it.
        MarkerFormatRegistry.get(value)
        return value

    def configure_logging(self) -> None:
        """Apply ``log_level`` to the package logger."""
        logging.getLogger("yaml_error_context").setLevel(self.log_level.upper())
