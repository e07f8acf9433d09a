"""Schema bootstrap for the reproduction.

Drops and recreates the CLASSROOM, PUZZLE_GROUP and PUZZLE tables with fixed
DDL statements. Everything here is destructive: never point it at a schema
holding data you care about.
"""

import logging

from sqlalchemy import Connection, func, select, text

from quantifier_repro.config import SUPPORTED_DIALECTS
from quantifier_repro.exceptions import UnsupportedDialectError
from quantifier_repro.orm.schema import Base, Classroom, Puzzle, PuzzleGroup

logger = logging.getLogger("Quantifier-Repro")

# CLASSROOM_ID and PUZZLE_GROUP_ID carry no foreign key constraint.
CREATE_TABLE_STATEMENTS: dict[str, tuple[str, ...]] = {
    "oracle": (
        """
CREATE TABLE CLASSROOM
(
    ID          NUMBER (19, 0) GENERATED ALWAYS AS IDENTITY NOT NULL,
    NAME        VARCHAR2(50 CHAR)
)""",
        """
CREATE TABLE PUZZLE_GROUP
(
    ID            NUMBER (19, 0) GENERATED ALWAYS AS IDENTITY NOT NULL,
    NAME          VARCHAR2(50 CHAR),
    CLASSROOM_ID  NUMBER (19, 0) NOT NULL
)""",
        """
CREATE TABLE PUZZLE
(
    ID              NUMBER (19, 0) GENERATED ALWAYS AS IDENTITY NOT NULL,
    PUZZLE_GROUP_ID NUMBER (19, 0) NOT NULL,
    COMPLETED       NUMBER (1, 0) NOT NULL
)""",
    ),
    "postgresql": (
        """
CREATE TABLE CLASSROOM
(
    ID          BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
    NAME        VARCHAR(50)
)""",
        """
CREATE TABLE PUZZLE_GROUP
(
    ID            BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
    NAME          VARCHAR(50),
    CLASSROOM_ID  BIGINT NOT NULL
)""",
        """
CREATE TABLE PUZZLE
(
    ID              BIGINT GENERATED ALWAYS AS IDENTITY PRIMARY KEY,
    PUZZLE_GROUP_ID BIGINT NOT NULL,
    COMPLETED       BOOLEAN NOT NULL
)""",
    ),
    # INTEGER PRIMARY KEY is the rowid alias, the only auto-generated key SQLite has.
    "sqlite": (
        """
CREATE TABLE CLASSROOM
(
    ID          INTEGER PRIMARY KEY AUTOINCREMENT,
    NAME        VARCHAR(50)
)""",
        """
CREATE TABLE PUZZLE_GROUP
(
    ID            INTEGER PRIMARY KEY AUTOINCREMENT,
    NAME          VARCHAR(50),
    CLASSROOM_ID  INTEGER NOT NULL
)""",
        """
CREATE TABLE PUZZLE
(
    ID              INTEGER PRIMARY KEY AUTOINCREMENT,
    PUZZLE_GROUP_ID INTEGER NOT NULL,
    COMPLETED       BOOLEAN NOT NULL
)""",
    ),
}


def get_create_table_statements(dialect_name: str) -> tuple[str, ...]:
    """Return the CREATE TABLE statements for a dialect.

    Raises:
        UnsupportedDialectError: If no DDL exists for the dialect.
    """
    statements = CREATE_TABLE_STATEMENTS.get(dialect_name)
    if statements is None:
        raise UnsupportedDialectError(dialect_name, SUPPORTED_DIALECTS)
    return statements


def drop_tables(conn: Connection) -> None:
    """Drop the three fixture tables if they exist."""
    Base.metadata.drop_all(conn, checkfirst=True)
    logger.info("Dropped existing tables (if any).")


def create_tables(conn: Connection) -> None:
    """Create the three fixture tables with the literal DDL for the connection's dialect."""
    for statement in get_create_table_statements(conn.dialect.name):
        conn.execute(text(statement))
    logger.info(f"Created tables {', '.join(sorted(Base.metadata.tables))} ({conn.dialect.name}).")


def reset_schema(conn: Connection) -> None:
    """Drop and recreate the schema so every run starts from a clean slate.

    Runs on the given connection, inside whatever transaction it has open.
    """
    drop_tables(conn)
    create_tables(conn)


def table_row_counts(conn: Connection) -> dict[str, int]:
    """Count the rows of each fixture table.

    Returns:
        Mapping of table name to row count.
    """
    return {
        model.__tablename__: conn.execute(select(func.count()).select_from(model)).scalar_one()
        for model in (Classroom, PuzzleGroup, Puzzle)
    }
