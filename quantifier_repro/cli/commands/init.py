"""init command - Write a template settings file."""

import json
import logging
from typing import Annotated

import typer

logger = logging.getLogger("Quantifier-Repro")

TEMPLATE_SETTINGS = {
    "DatabaseServer": "localhost",
    "UserId": "postgres",
    "Password": "postgres",
    "ServiceName": "quantifier_repro",
    "Port": "5432",
    "DevartLicenseKey": "unused",
    "Dialect": "postgresql",
}


def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing settings file"),
    ] = False,
) -> None:
    """Write a template settings file to the configured settings path.

    Existing files are not overwritten unless --force is given.

    Examples:
      quantifier-repro init
      quantifier-repro --settings=appsettings.oracle.json init
    """
    import quantifier_repro.cli as cli

    settings_path = cli.SETTINGS_PATH
    if settings_path is None:
        raise RuntimeError("Settings path is not set.")  # noqa: TRY003

    if settings_path.exists() and not force:
        logger.info(f"  [skip] {settings_path} (already exists)")
        return

    settings_path.parent.mkdir(parents=True, exist_ok=True)
    settings_path.write_text(json.dumps(TEMPLATE_SETTINGS, indent=2) + "\n")
    logger.info(
        f"  [ok] {settings_path}"
        "\nNext steps:"
        f"\n  1. Edit {settings_path.name} with your database credentials"
        "\n  2. Run the reproduction: quantifier-repro run"
    )
