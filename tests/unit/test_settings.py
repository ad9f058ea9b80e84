"""Tests for environment-driven settings."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from yaml_error_context.settings import Settings


class TestSettings:
    def test_defaults(self) -> None:
        """serde_yaml markers and WARNING logging by default."""
        settings = Settings()
        assert settings.marker_format == "serde_yaml"
        assert settings.log_level == "WARNING"

    def test_marker_format_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """YAML_ERROR_CONTEXT_MARKER_FORMAT overrides the default."""
        monkeypatch.setenv("YAML_ERROR_CONTEXT_MARKER_FORMAT", "pyyaml")
        assert Settings().marker_format == "pyyaml"

    def test_env_file(self, tmp_path: Path) -> None:
        """Values are read from a .env file in the working directory."""
        (tmp_path / ".env").write_text("YAML_ERROR_CONTEXT_LOG_LEVEL=debug\n", encoding="utf-8")
        assert Settings().log_level == "debug"

    def test_unknown_marker_format_rejected(self) -> None:
        """Unregistered marker formats fail validation."""
        with pytest.raises(ValidationError, match="Unsupported marker format 'toml'"):
            Settings(marker_format="toml")

    def test_configure_logging(self) -> None:
        """log_level is applied to the package logger."""
        logger = logging.getLogger("yaml_error_context")
        previous = logger.level
        try:
            Settings(log_level="debug").configure_logging()
            assert logger.level == logging.DEBUG
        finally:
            logger.setLevel(previous)
