"""Tests for quantifier_repro.cli.app module."""

import re
from pathlib import Path

import pytest
from typer.testing import CliRunner

import quantifier_repro.cli as cli
from quantifier_repro.cli.app import app


class TestMainCallback:
    """Tests for the main_callback function (global options)."""

    def test_settings_path_set_from_option(
        self, cli_runner: CliRunner, tmp_path: Path, reset_settings_path: None
    ) -> None:
        """--settings option sets cli.SETTINGS_PATH."""
        settings_file = tmp_path / "my_settings.json"

        cli_runner.invoke(app, ["--settings", str(settings_file), "show-sql", "--dialect", "sqlite"])

        assert settings_file.resolve() == cli.SETTINGS_PATH

    def test_settings_path_defaults_to_cwd(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, reset_settings_path: None
    ) -> None:
        """Without --settings, defaults to ./appsettings.development.json."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("REPRO_SETTINGS_PATH", raising=False)

        cli_runner.invoke(app, ["show-sql", "--dialect", "sqlite"])

        assert (tmp_path / "appsettings.development.json").resolve() == cli.SETTINGS_PATH

    def test_settings_path_from_env_var(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, reset_settings_path: None
    ) -> None:
        """REPRO_SETTINGS_PATH env var sets the settings path."""
        settings_file = tmp_path / "env_settings.json"
        monkeypatch.setenv("REPRO_SETTINGS_PATH", str(settings_file))

        cli_runner.invoke(app, ["show-sql", "--dialect", "sqlite"])

        assert settings_file.resolve() == cli.SETTINGS_PATH

    def test_cli_option_overrides_env_var(
        self, cli_runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, reset_settings_path: None
    ) -> None:
        """CLI --settings takes precedence over env var."""
        env_file = tmp_path / "env_settings.json"
        cli_file = tmp_path / "cli_settings.json"
        monkeypatch.setenv("REPRO_SETTINGS_PATH", str(env_file))

        cli_runner.invoke(app, ["--settings", str(cli_file), "show-sql", "--dialect", "sqlite"])

        assert cli_file.resolve() == cli.SETTINGS_PATH


class TestVersionFlag:
    """Tests for the --version flag."""

    @pytest.mark.parametrize("flag", ["--version", "-V"])
    def test_version_flag(self, cli_runner: CliRunner, flag: str) -> None:
        result = cli_runner.invoke(app, [flag])

        assert result.exit_code == 0
        assert "quantifier-repro" in result.stdout
        assert re.search(r"\d+\.\d+\.\d+", result.stdout)


class TestHelp:
    def test_no_args_shows_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [])

        assert "Usage" in result.output

    def test_help_lists_commands(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for command in ("run", "show-sql", "init"):
            assert command in result.output
