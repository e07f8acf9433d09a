"""show-sql command - Print the SQL generated for both quantified queries."""

from typing import Annotated

import typer

from quantifier_repro.config import SUPPORTED_DIALECTS


def show_sql(
    dialect: Annotated[
        str | None,
        typer.Option("--dialect", "-d", help=f"Dialect to compile for: {', '.join(SUPPORTED_DIALECTS)} (default: all)"),
    ] = None,
) -> None:
    """Print the SQL each backend would receive for the exists-exists and forall-forall queries.

    Compiles the statements offline; no database connection or driver is needed.

    Examples:
      quantifier-repro show-sql
      quantifier-repro show-sql --dialect oracle
    """
    from quantifier_repro.orm.quantifiers import render_sql
    from quantifier_repro.orm.repository.classroom import ClassroomRepository
    from quantifier_repro.orm.service.reproduction import EXISTS_QUERY_NAME, FOR_ALL_QUERY_NAME

    if dialect is not None and dialect not in SUPPORTED_DIALECTS:
        typer.echo(f"Unknown dialect '{dialect}'. Available: {', '.join(SUPPORTED_DIALECTS)}", err=True)
        raise typer.Exit(1)

    statements = {
        EXISTS_QUERY_NAME: ClassroomRepository.any_group_any_completed_statement(),
        FOR_ALL_QUERY_NAME: ClassroomRepository.all_groups_all_completed_statement(),
    }

    for dialect_name in [dialect] if dialect else SUPPORTED_DIALECTS:
        typer.echo(f"\n=== {dialect_name} ===")
        for name, statement in statements.items():
            typer.echo(f"\n-- {name}")
            typer.echo(render_sql(statement, dialect_name))
