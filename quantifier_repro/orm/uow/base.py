"""Base Unit of Work for the reproduction.

A Unit of Work owns one session for the duration of a `with` block and is the
transactional scope of the program: work inside the block is committed
explicitly, and anything that raises inside the block is rolled back.
"""

from abc import ABC, abstractmethod
from typing import Any

from sqlalchemy.orm import Session, sessionmaker
from typing_extensions import Self

from quantifier_repro.exceptions import SessionNotSetError


class BaseUnitOfWork(ABC):
    """Abstract base class for Unit of Work pattern.

    Provides common functionality for managing database transactions:
    - Session lifecycle management (context manager)
    - Transaction operations (commit, rollback, flush)
    - Lazy repository initialization helper

    Subclasses must implement:
    - `_reset_repositories()`: Drop cached repositories on exit
    - Repository properties using `_get_repository()` helper
    """

    def __init__(self, session_factory: sessionmaker[Session]):
        """Initialize Unit of Work with a session factory.

        Args:
            session_factory: SQLAlchemy sessionmaker instance.
        """
        self.session_factory = session_factory
        self.session: Session | None = None

    def __enter__(self) -> Self:
        """Enter the context manager and create a new session."""
        self.session = self.session_factory()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit the context manager and clean up session.

        Automatically rolls back if an exception occurred.
        """
        if exc_type is not None:
            self.rollback()
        if self.session:
            self.session.close()
            self.session = None
        self._reset_repositories()

    @abstractmethod
    def _reset_repositories(self) -> None:
        """Reset all repository references to None.

        Called during cleanup to ensure repositories are recreated on next access.
        """
        ...

    @classmethod
    def available_repositories(cls) -> list[str]:
        """Names of the repository properties this Unit of Work exposes."""
        return [name for name, attr in vars(cls).items() if isinstance(attr, property)]

    def _get_repository(self, repo_attr: str, repo_class: type) -> Any:
        """Helper method for lazy repository initialization.

        Args:
            repo_attr: Name of the private repository attribute (e.g., "_classroom_repo").
            repo_class: Repository class to instantiate with the current session.

        Returns:
            Repository instance.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        if self.session is None:
            raise SessionNotSetError

        cached_repo = getattr(self, repo_attr, None)
        if cached_repo is not None:
            return cached_repo

        repo = repo_class(self.session)
        setattr(self, repo_attr, repo)
        return repo

    @property
    def connection(self):
        """The connection bound to the current session's transaction."""
        if self.session is None:
            raise SessionNotSetError
        return self.session.connection()

    def commit(self) -> None:
        """Commit the current transaction."""
        if self.session:
            self.session.commit()

    def rollback(self) -> None:
        """Rollback the current transaction."""
        if self.session:
            self.session.rollback()

    def flush(self) -> None:
        """Flush pending changes without committing."""
        if self.session:
            self.session.flush()
