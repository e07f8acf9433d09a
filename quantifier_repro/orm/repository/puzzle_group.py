from sqlalchemy import select
from sqlalchemy.orm import Session

from quantifier_repro.orm.repository.base import GenericRepository
from quantifier_repro.orm.schema import PuzzleGroup


class PuzzleGroupRepository(GenericRepository[PuzzleGroup]):
    """Repository for PuzzleGroup entity."""

    def __init__(self, session: Session, model_cls: type[PuzzleGroup] = PuzzleGroup):
        super().__init__(session, model_cls)

    def get_by_classroom_id(self, classroom_id: int) -> list[PuzzleGroup]:
        """Retrieve the puzzle groups of a classroom, ordered by id."""
        stmt = (
            select(self.model_cls).where(self.model_cls.classroom_id == classroom_id).order_by(self.model_cls.id)
        )
        return list(self.session.execute(stmt).scalars().all())
