"""Quantified predicates over one-to-many relationships.

``exists`` and ``for_all`` turn a relationship attribute and a predicate on its
child entity into a correlated subquery:

- ``exists(Parent.children, p)``  ->  ``EXISTS (SELECT 1 FROM child WHERE <join> AND p)``
- ``for_all(Parent.children, p)`` ->  ``NOT EXISTS (SELECT 1 FROM child WHERE <join> AND NOT p)``

Both compose, so nested quantifiers over several levels of the hierarchy are
plain nested calls. A parent with no children satisfies every ``for_all``.
"""

from sqlalchemy import not_
from sqlalchemy.dialects import oracle, postgresql, sqlite
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import QueryableAttribute
from sqlalchemy.sql.expression import ColumnElement, Executable

from quantifier_repro.config import SUPPORTED_DIALECTS
from quantifier_repro.exceptions import UnsupportedDialectError

DIALECTS = {
    "postgresql": postgresql.dialect,
    "oracle": oracle.dialect,
    "sqlite": sqlite.dialect,
}


def exists(relationship: QueryableAttribute, predicate: ColumnElement[bool]) -> ColumnElement[bool]:
    """At least one related row satisfies the predicate."""
    return relationship.any(predicate)


def for_all(relationship: QueryableAttribute, predicate: ColumnElement[bool]) -> ColumnElement[bool]:
    """Every related row satisfies the predicate (no related row violates it)."""
    return ~relationship.any(not_(predicate))


def get_dialect(dialect_name: str) -> Dialect:
    """Instantiate a SQLAlchemy dialect by name, without a database driver."""
    dialect_cls = DIALECTS.get(dialect_name)
    if dialect_cls is None:
        raise UnsupportedDialectError(dialect_name, SUPPORTED_DIALECTS)
    return dialect_cls()


def render_sql(statement: Executable, dialect_name: str) -> str:
    """Compile a statement to the SQL text a backend would receive.

    Bound values are rendered inline so the output is a complete statement.

    Args:
        statement: The SQLAlchemy statement to compile.
        dialect_name: One of "postgresql", "oracle", "sqlite".

    Returns:
        The generated SQL.
    """
    compiled = statement.compile(dialect=get_dialect(dialect_name), compile_kwargs={"literal_binds": True})
    return str(compiled)
