import logging
import os
from dataclasses import dataclass, field

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import URL
from sqlalchemy.orm import Session, sessionmaker

from quantifier_repro.config import DEFAULT_DIALECT, SUPPORTED_DIALECTS, Settings
from quantifier_repro.exceptions import UnsupportedDialectError

logger = logging.getLogger("Quantifier-Repro")

DRIVERS = {
    "postgresql": "postgresql+psycopg",
    "oracle": "oracle+oracledb",
    "sqlite": "sqlite",
}

# SQLite has no READ COMMITTED level; SERIALIZABLE is its default.
WRITE_ISOLATION_LEVELS = {
    "postgresql": "READ COMMITTED",
    "oracle": "READ COMMITTED",
    "sqlite": "SERIALIZABLE",
}


@dataclass
class DBConnection:
    """Database connection configuration."""

    host: str
    port: int
    username: str
    password: str = field(repr=False)
    database: str
    dialect: str = DEFAULT_DIALECT

    def __post_init__(self):
        if self.dialect not in DRIVERS:
            raise UnsupportedDialectError(self.dialect, SUPPORTED_DIALECTS)

    @property
    def url(self) -> URL:
        """Construct the SQLAlchemy database URL."""
        if self.dialect == "sqlite":
            return URL.create(DRIVERS["sqlite"], database=self.database)
        if self.dialect == "oracle":
            return URL.create(
                DRIVERS["oracle"],
                username=self.username,
                password=self.password,
                host=self.host,
                port=self.port,
                query={"service_name": self.database},
            )
        return URL.create(
            DRIVERS[self.dialect],
            username=self.username,
            password=self.password,
            host=self.host,
            port=self.port,
            database=self.database,
        )

    @property
    def redacted_url(self) -> str:
        """The database URL with the password masked, safe for logging."""
        return self.url.render_as_string(hide_password=True)

    @property
    def write_isolation_level(self) -> str:
        return WRITE_ISOLATION_LEVELS[self.dialect]

    def get_engine(self, isolation_level: str | None = None) -> Engine:
        """Create a SQLAlchemy engine using the connection configuration.

        Args:
            isolation_level: Transaction isolation level for every connection of the engine.
                None keeps the driver default.
        """
        kwargs = {"pool_pre_ping": True}
        if isolation_level is not None:
            kwargs["isolation_level"] = isolation_level
        return create_engine(self.url, **kwargs)

    def get_session_factory(self, isolation_level: str | None = None) -> sessionmaker[Session]:
        """Create a SQLAlchemy session factory using the connection configuration."""
        engine = self.get_engine(isolation_level)
        return sessionmaker(bind=engine)

    @classmethod
    def from_settings(cls, settings: Settings) -> "DBConnection":
        """Assemble the connection from a loaded settings file.

        The service name doubles as the database name for PostgreSQL and
        as the database file path for SQLite.
        """
        return cls(
            host=settings.database_server,
            port=settings.port,
            username=settings.user_id,
            password=settings.password,
            database=settings.service_name,
            dialect=settings.dialect,
        )

    @classmethod
    def from_env(cls) -> "DBConnection":
        """Load database connection configuration from environment variables.

        Returns:
            DBConnection instance with loaded configuration.
        """
        dialect = os.getenv("REPRO_DB_DIALECT", DEFAULT_DIALECT)
        host = os.getenv("REPRO_DB_HOST", "localhost")
        port = int(os.getenv("REPRO_DB_PORT", "5432"))
        username = os.getenv("REPRO_DB_USER")
        password = os.getenv("REPRO_DB_PASSWORD")
        database = os.getenv("REPRO_DB_NAME")

        if dialect != "sqlite" and not all([host, port, username, password, database]):
            raise ValueError("Missing required database environment variables.")  # noqa: TRY003
        if database is None:
            raise ValueError("REPRO_DB_NAME must be set.")  # noqa: TRY003

        return cls(
            host=host,
            port=port,
            username=str(username or ""),
            password=str(password or ""),
            database=database,
            dialect=dialect,
        )
