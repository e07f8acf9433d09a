"""Seed + query driver.

Recreates the schema and seeds a fixture inside one transactional scope, then
runs the two quantified queries from a fresh session:

- exists-exists: first Classroom where some PuzzleGroup has some completed Puzzle.
- forall-forall: first Classroom where every PuzzleGroup has every Puzzle completed.

Errors are not caught here. A query that fails to translate or execute
propagates to the caller unchanged.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy.orm import Session, sessionmaker

from quantifier_repro.exceptions import SessionNotSetError
from quantifier_repro.fixtures import DEFAULT_FIXTURE, FixtureSpec, build_fixture_graph
from quantifier_repro.orm.connection import DBConnection
from quantifier_repro.orm.quantifiers import render_sql
from quantifier_repro.orm.repository.classroom import ClassroomRepository
from quantifier_repro.orm.schema import Classroom
from quantifier_repro.orm.uow.classroom_uow import ClassroomUnitOfWork
from quantifier_repro.orm.util import reset_schema, table_row_counts

logger = logging.getLogger("Quantifier-Repro")

EXISTS_QUERY_NAME = "exists-exists"
FOR_ALL_QUERY_NAME = "forall-forall"


@dataclass
class QueryOutcome:
    """Result of one quantified query."""

    name: str
    sql: str
    classroom_name: str | None
    expected_match: bool

    @property
    def matched(self) -> bool:
        return self.classroom_name is not None

    @property
    def matches_expectation(self) -> bool:
        return self.matched == self.expected_match


@dataclass
class ReproductionReport:
    fixture: FixtureSpec
    exists_outcome: QueryOutcome
    for_all_outcome: QueryOutcome

    @property
    def all_as_expected(self) -> bool:
        return self.exists_outcome.matches_expectation and self.for_all_outcome.matches_expectation


class ReproductionService:
    """Seeds the fixture hierarchy and runs the exists/for-all query pair.

    Example:
        >>> service = ReproductionService.from_connection(DBConnection.from_settings(settings))
        >>> report = service.run()
        >>> report.for_all_outcome.classroom_name is None
        True
    """

    def __init__(
        self,
        write_session_factory: sessionmaker[Session],
        read_session_factory: sessionmaker[Session] | None = None,
    ):
        """Initialize the service.

        Args:
            write_session_factory: Session factory for the schema reset and seeding transaction.
            read_session_factory: Session factory for the queries. Defaults to the write factory.
        """
        self.write_session_factory = write_session_factory
        self.read_session_factory = read_session_factory or write_session_factory

    @classmethod
    def from_connection(cls, db_connection: DBConnection) -> "ReproductionService":
        """Build a service whose writes run at the connection's read-committed isolation level."""
        logger.info(f"Connecting to {db_connection.redacted_url}")
        return cls(
            write_session_factory=db_connection.get_session_factory(db_connection.write_isolation_level),
            read_session_factory=db_connection.get_session_factory(),
        )

    def _create_uow(self, session_factory: sessionmaker[Session]) -> ClassroomUnitOfWork:
        return ClassroomUnitOfWork(session_factory)

    def dispose(self) -> None:
        """Close the connection pools of both session factories."""
        for session_factory in {self.write_session_factory, self.read_session_factory}:
            bind = session_factory.kw.get("bind")
            if bind is not None:
                bind.dispose()

    def seed(self, spec: FixtureSpec = DEFAULT_FIXTURE) -> int:
        """Recreate the schema and insert the fixture graph in one transaction.

        The transaction commits only if the whole save succeeds.

        Args:
            spec: The fixture to seed.

        Returns:
            The id assigned to the seeded classroom.
        """
        with self._create_uow(self.write_session_factory) as uow:
            if uow.session is None:
                raise SessionNotSetError
            reset_schema(uow.connection)

            entities = build_fixture_graph(spec)
            uow.classrooms.add_all(entities)
            uow.flush()
            classroom_id = entities[0].id
            counts = table_row_counts(uow.connection)
            uow.commit()

        logger.info(
            f"Seeded fixture '{spec.classroom_name}': {counts['classroom']} classroom(s), "
            f"{counts['puzzle_group']} puzzle group(s), {counts['puzzle']} puzzle(s)."
        )
        return classroom_id

    def run_queries(self, spec: FixtureSpec = DEFAULT_FIXTURE) -> ReproductionReport:
        """Run the exists-exists query, then the forall-forall query, from a fresh session.

        Args:
            spec: The seeded fixture, used for the expected answer of each query.

        Returns:
            Report with the outcome of both queries.
        """
        with self._create_uow(self.read_session_factory) as uow:
            if uow.session is None:
                raise SessionNotSetError
            dialect_name = uow.session.get_bind().dialect.name

            exists_outcome = self._run_query(
                EXISTS_QUERY_NAME,
                render_sql(ClassroomRepository.any_group_any_completed_statement(), dialect_name),
                uow.classrooms.first_with_any_completed_puzzle,
                spec.expects_any_completed,
            )
            for_all_outcome = self._run_query(
                FOR_ALL_QUERY_NAME,
                render_sql(ClassroomRepository.all_groups_all_completed_statement(), dialect_name),
                uow.classrooms.first_with_all_puzzles_completed,
                spec.expects_all_completed,
            )

        return ReproductionReport(fixture=spec, exists_outcome=exists_outcome, for_all_outcome=for_all_outcome)

    def run(self, spec: FixtureSpec = DEFAULT_FIXTURE) -> ReproductionReport:
        """Seed the fixture, then run both queries."""
        self.seed(spec)
        return self.run_queries(spec)

    @staticmethod
    def _run_query(
        name: str, sql: str, query: Callable[[], Classroom | None], expected_match: bool
    ) -> QueryOutcome:
        logger.debug(f"[{name}] {sql}")
        classroom = query()
        outcome = QueryOutcome(
            name=name,
            sql=sql,
            classroom_name=classroom.name if classroom is not None else None,
            expected_match=expected_match,
        )
        if outcome.matches_expectation:
            logger.info(f"[{name}] returned {outcome.classroom_name!r} as expected.")
        else:
            logger.warning(
                f"[{name}] returned {outcome.classroom_name!r}, expected {'a match' if expected_match else 'no match'}."
            )
        return outcome
