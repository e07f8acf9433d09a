from sqlalchemy import func, select
from sqlalchemy.orm import Session

from quantifier_repro.orm.repository.base import GenericRepository
from quantifier_repro.orm.schema import Puzzle


class PuzzleRepository(GenericRepository[Puzzle]):
    """Repository for Puzzle entity."""

    def __init__(self, session: Session, model_cls: type[Puzzle] = Puzzle):
        super().__init__(session, model_cls)

    def get_by_puzzle_group_id(self, puzzle_group_id: int) -> list[Puzzle]:
        """Retrieve the puzzles of a group, ordered by id."""
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.puzzle_group_id == puzzle_group_id)
            .order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).scalars().all())

    def count_by_completed(self) -> dict[bool, int]:
        """Count puzzles per completion flag.

        Returns:
            Mapping of completion flag to number of puzzles, e.g. ``{True: 3, False: 1}``.
        """
        stmt = select(self.model_cls.completed, func.count()).group_by(self.model_cls.completed)
        counts = {True: 0, False: 0}
        for completed, count in self.session.execute(stmt).all():
            counts[bool(completed)] = count
        return counts
