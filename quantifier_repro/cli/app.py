"""Typer-based CLI application for quantifier-repro."""

import logging
from importlib.metadata import version as get_version
from pathlib import Path
from typing import Annotated

import typer

import quantifier_repro.cli as cli
from quantifier_repro.cli.commands.init import init
from quantifier_repro.cli.commands.run import run_command
from quantifier_repro.cli.commands.show_sql import show_sql
from quantifier_repro.config import DEFAULT_SETTINGS_FILE

# Configure logging for CLI output
logging.basicConfig(
    level=logging.INFO,
    format="%(message)s",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"quantifier-repro {get_version('quantifier-repro')}")
        raise typer.Exit()


# Main Typer app
app = typer.Typer(
    name="quantifier-repro",
    help="Reproduce nested exists / for-all query translation over Classroom → PuzzleGroup → Puzzle.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    settings_path: Annotated[
        Path | None,
        typer.Option(
            "--settings",
            "-s",
            help="Path to the JSON settings file",
            envvar="REPRO_SETTINGS_PATH",
        ),
    ] = None,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Reproduce nested exists / for-all query translation.

    Global options are processed before any command.
    """
    # Set global settings path (default: ./appsettings.development.json)
    cli.SETTINGS_PATH = (settings_path or Path.cwd() / DEFAULT_SETTINGS_FILE).resolve()


app.command(name="run")(run_command)
app.command(name="show-sql")(show_sql)
app.command(name="init")(init)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
