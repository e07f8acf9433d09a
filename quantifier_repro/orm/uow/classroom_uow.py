"""Unit of Work over the Classroom → PuzzleGroup → Puzzle hierarchy."""

from sqlalchemy.orm import Session, sessionmaker

from quantifier_repro.orm.repository.classroom import ClassroomRepository
from quantifier_repro.orm.repository.puzzle import PuzzleRepository
from quantifier_repro.orm.repository.puzzle_group import PuzzleGroupRepository
from quantifier_repro.orm.uow.base import BaseUnitOfWork


class ClassroomUnitOfWork(BaseUnitOfWork):
    """Unit of Work exposing lazily created repositories for all three fixture tables."""

    def __init__(self, session_factory: sessionmaker[Session]):
        super().__init__(session_factory)
        self._classroom_repo: ClassroomRepository | None = None
        self._puzzle_group_repo: PuzzleGroupRepository | None = None
        self._puzzle_repo: PuzzleRepository | None = None

    def _reset_repositories(self) -> None:
        """Reset all repository references to None."""
        self._classroom_repo = None
        self._puzzle_group_repo = None
        self._puzzle_repo = None

    @property
    def classrooms(self) -> ClassroomRepository:
        """Get the Classroom repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_classroom_repo", ClassroomRepository)

    @property
    def puzzle_groups(self) -> PuzzleGroupRepository:
        """Get the PuzzleGroup repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_puzzle_group_repo", PuzzleGroupRepository)

    @property
    def puzzles(self) -> PuzzleRepository:
        """Get the Puzzle repository.

        Raises:
            SessionNotSetError: If session is not initialized.
        """
        return self._get_repository("_puzzle_repo", PuzzleRepository)
