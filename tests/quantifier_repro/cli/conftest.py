"""Shared fixtures for CLI tests."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

import quantifier_repro.cli as cli


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a Typer CliRunner for testing commands."""
    return CliRunner()


@pytest.fixture
def reset_settings_path(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset cli.SETTINGS_PATH to None before test."""
    monkeypatch.setattr(cli, "SETTINGS_PATH", None)


@pytest.fixture
def sqlite_settings_file(tmp_path: Path) -> Path:
    """Write a settings file pointing at a SQLite database in a temp directory."""
    path = tmp_path / "appsettings.development.json"
    path.write_text(
        json.dumps({
            "DatabaseServer": "localhost",
            "UserId": "repro",
            "Password": "secret",
            "ServiceName": str(tmp_path / "repro.sqlite3"),
            "Port": "0",
            "DevartLicenseKey": "unused",
            "Dialect": "sqlite",
        })
    )
    return path
