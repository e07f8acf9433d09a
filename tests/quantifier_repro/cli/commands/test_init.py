"""Tests for quantifier_repro.cli.commands.init module."""

import json
from pathlib import Path

from typer.testing import CliRunner

from quantifier_repro.cli.app import app
from quantifier_repro.cli.commands.init import TEMPLATE_SETTINGS
from quantifier_repro.config import Settings


class TestInitCommand:
    def test_init_writes_loadable_template(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        settings_file = tmp_path / "configs" / "appsettings.development.json"

        result = cli_runner.invoke(app, ["--settings", str(settings_file), "init"])

        assert result.exit_code == 0, result.output
        assert json.loads(settings_file.read_text()) == TEMPLATE_SETTINGS
        settings = Settings.from_file(settings_file)
        assert settings.dialect == "postgresql"
        assert settings.port == 5432

    def test_init_skips_existing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        settings_file = tmp_path / "appsettings.development.json"
        settings_file.write_text("{}")

        result = cli_runner.invoke(app, ["--settings", str(settings_file), "init"])

        assert result.exit_code == 0
        assert settings_file.read_text() == "{}"

    def test_init_force_overwrites(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        settings_file = tmp_path / "appsettings.development.json"
        settings_file.write_text("{}")

        result = cli_runner.invoke(app, ["--settings", str(settings_file), "init", "--force"])

        assert result.exit_code == 0
        assert json.loads(settings_file.read_text()) == TEMPLATE_SETTINGS
