"""run command - Seed the fixture and run the exists / for-all query pair."""

import logging
import traceback
from typing import Annotated

import typer

from quantifier_repro.fixtures import FIXTURES

logger = logging.getLogger("Quantifier-Repro")


def run_command(
    fixture: Annotated[
        str,
        typer.Option("--fixture", "-f", help=f"Fixture to seed: {', '.join(FIXTURES)}"),
    ] = "default",
    pause: Annotated[
        bool,
        typer.Option("--pause/--no-pause", help="Wait for a keypress before exiting"),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log the generated SQL of each query"),
    ] = False,
) -> None:
    """Drop and recreate the tables, seed a fixture, and run both quantified queries.

    DESTRUCTIVE: drops CLASSROOM, PUZZLE_GROUP and PUZZLE in the configured database.
    Prints 'Finished.' on success, or the full exception on any failure.

    Examples:
      quantifier-repro run
      quantifier-repro --settings=appsettings.oracle.json run --fixture all-completed
    """
    import quantifier_repro.cli as cli
    from quantifier_repro.config import Settings
    from quantifier_repro.orm.connection import DBConnection
    from quantifier_repro.orm.service.reproduction import ReproductionService

    if fixture not in FIXTURES:
        typer.echo(f"Unknown fixture '{fixture}'. Available: {', '.join(FIXTURES)}", err=True)
        raise typer.Exit(2)

    if verbose:
        logger.setLevel(logging.DEBUG)

    failed = False
    service = None
    try:
        settings = Settings.from_file(cli.SETTINGS_PATH)
        service = ReproductionService.from_connection(DBConnection.from_settings(settings))
        report = service.run(FIXTURES[fixture])

        for outcome in (report.exists_outcome, report.for_all_outcome):
            typer.echo(f"[{outcome.name}] {outcome.classroom_name!r}")
        typer.echo("Finished.")
    except Exception:
        typer.echo(traceback.format_exc(), err=True)
        failed = True
    finally:
        if service is not None:
            service.dispose()

    if pause:
        typer.pause()

    if failed:
        raise typer.Exit(1)
