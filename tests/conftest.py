import os
from collections.abc import Generator
from typing import Any

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from quantifier_repro.fixtures import DEFAULT_FIXTURE
from quantifier_repro.orm.service.reproduction import ReproductionService


@pytest.fixture(scope="session")
def db_engine(tmp_path_factory):
    """Create a database engine for the test session.

    Uses TEST_DATABASE_URL (any SQLAlchemy URL, e.g. a PostgreSQL or Oracle test database) when set,
    otherwise a SQLite file in a temporary directory.
    The tables are dropped and recreated by the tests, so never point TEST_DATABASE_URL at real data.
    """
    url = os.getenv("TEST_DATABASE_URL")
    if not url:
        url = f"sqlite:///{tmp_path_factory.mktemp('db') / 'quantifier_repro.sqlite3'}"

    engine = create_engine(url, pool_pre_ping=True)

    yield engine

    engine.dispose()


@pytest.fixture(scope="session")
def session_factory(db_engine) -> sessionmaker[Session]:
    return sessionmaker(bind=db_engine)


@pytest.fixture
def reproduction_service(session_factory) -> ReproductionService:
    return ReproductionService(session_factory)


@pytest.fixture
def seeded_db(reproduction_service) -> int:
    """Reset the schema and seed the default fixture. Returns the classroom id."""
    return reproduction_service.seed(DEFAULT_FIXTURE)


@pytest.fixture
def db_session(session_factory, seeded_db) -> Generator[Session, Any, None]:
    """Create a new database session on the seeded default fixture.

    The session is rolled back and closed after the test.
    """
    session = session_factory()

    yield session

    session.rollback()
    session.close()
