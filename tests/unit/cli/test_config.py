"""Unit tests for the config commands and global options."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
from r2import import __version__
from r2import.cli.main import LOG_FORMAT, app, configure_logging
from r2import.core.settings import load_settings
from typer.testing import CliRunner

runner = CliRunner()


class TestGlobalOptions:
    """Tests for top-level options."""

    def test_version(self) -> None:
        """--version prints the version."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout

    @pytest.mark.parametrize(("args", "verbose"), [([], False), (["--verbose"], True)])
    def test_logging_configured_for_every_run(
        self, tmp_path: Path, args: list[str], verbose: bool
    ) -> None:
        """Logging is configured with or without --verbose."""
        settings_path = tmp_path / "settings.toml"
        with patch("r2import.cli.main.configure_logging") as configure:
            result = runner.invoke(app, [*args, "--config", str(settings_path), "config", "show"])

        assert result.exit_code == 0, result.output
        configure.assert_called_once_with(verbose)

    @pytest.mark.parametrize(("verbose", "level"), [(False, logging.WARNING), (True, logging.DEBUG)])
    def test_configure_logging_levels(self, verbose: bool, level: int) -> None:
        """Warnings go through the configured format unless verbose lowers the level."""
        with patch("logging.basicConfig") as basic_config:
            configure_logging(verbose)

        basic_config.assert_called_once_with(level=level, format=LOG_FORMAT)


class TestConfigCommands:
    """Tests for r2import config."""

    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        """config init writes a loadable settings file."""
        path = tmp_path / "settings.toml"

        result = runner.invoke(app, ["--config", str(path), "config", "init"])

        assert result.exit_code == 0, result.output
        assert load_settings(path).staging_profile_name == "_profile_update"

    def test_init_refuses_overwrite(self, tmp_path: Path) -> None:
        """An existing file is kept unless --force is given."""
        path = tmp_path / "settings.toml"
        path.write_text('loader_config_dir = "custom"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "init"])
        assert result.exit_code == 1
        assert load_settings(path).loader_config_dir == "custom"

        result = runner.invoke(app, ["--config", str(path), "config", "init", "--force"])
        assert result.exit_code == 0
        assert load_settings(path).loader_config_dir == "BepInEx/config"

    def test_show(self, tmp_path: Path) -> None:
        """config show lists every setting."""
        path = tmp_path / "settings.toml"
        path.write_text('staging_profile_name = "_staging"\n')

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 0
        assert "staging_profile_name" in result.stdout
        assert "_staging" in result.stdout

    def test_show_invalid_settings(self, tmp_path: Path) -> None:
        """Invalid settings exit with code 1."""
        path = tmp_path / "settings.toml"
        path.write_text("unknown = 1\n")

        result = runner.invoke(app, ["--config", str(path), "config", "show"])

        assert result.exit_code == 1
