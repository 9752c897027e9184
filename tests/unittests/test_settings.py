"""ABOUTME: Tests for project settings and logging setup.
ABOUTME: Verifies config paths, the result cap default, and YAML logging initialization."""

import logging
from pathlib import Path

import pytest

from soullink.logs import init_logging
from soullink.settings import Settings, settings


class TestSettings:
    """Tests for Settings."""

    def test_default_cap(self) -> None:
        """The combination cap defaults to 50."""
        assert Settings().MAX_COMBINATIONS == 50

    def test_cap_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The cap can be overridden through the environment."""
        monkeypatch.setenv("MAX_COMBINATIONS", "10")

        assert Settings().MAX_COMBINATIONS == 10

    def test_config_paths(self) -> None:
        """Config paths live under the project's configs directory."""
        assert settings.configs_dir == settings.PROJECT_ROOT / "configs"
        assert settings.logging_config_path.name == "logging.yml"
        assert settings.run_config_path.name == "run.yml"

    def test_logging_config_shipped(self) -> None:
        """The default logging config exists."""
        assert settings.logging_config_path.exists()


class TestInitLogging:
    """Tests for init_logging."""

    def test_applies_config(self, tmp_path: Path) -> None:
        """Logger levels from the YAML file are applied."""
        config_path = tmp_path / "logging.yml"
        config_path.write_text("""
version: 1
disable_existing_loggers: false
loggers:
  soullink.test_logging:
    level: ERROR
""")

        config = init_logging(config_path)

        assert config["version"] == 1
        assert logging.getLogger("soullink.test_logging").level == logging.ERROR
