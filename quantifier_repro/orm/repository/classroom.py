"""Classroom repository.

Holds the two quantified queries the reproduction is about:

- "exists-exists": a classroom where some group has some completed puzzle.
- "forall-forall": a classroom where every group has every puzzle completed.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import Session, selectinload

from quantifier_repro.orm.quantifiers import exists, for_all
from quantifier_repro.orm.repository.base import GenericRepository
from quantifier_repro.orm.schema import Classroom, Puzzle, PuzzleGroup


class ClassroomRepository(GenericRepository[Classroom]):
    """Repository for Classroom entity with quantified hierarchy queries."""

    def __init__(self, session: Session, model_cls: type[Classroom] = Classroom):
        super().__init__(session, model_cls)

    def get_by_name(self, name: str) -> Classroom | None:
        stmt = select(self.model_cls).where(self.model_cls.name == name)
        return self.session.execute(stmt).scalar_one_or_none()

    def get_with_hierarchy(self, classroom_id: int) -> Classroom | None:
        """Retrieve a classroom with its groups and their puzzles eagerly loaded."""
        stmt = (
            select(self.model_cls)
            .where(self.model_cls.id == classroom_id)
            .options(selectinload(self.model_cls.puzzle_groups).selectinload(PuzzleGroup.puzzles))
        )
        return self.session.execute(stmt).scalar_one_or_none()

    @staticmethod
    def any_group_any_completed_statement() -> Select[tuple[Classroom]]:
        """First classroom where some puzzle group has some completed puzzle."""
        predicate = exists(Classroom.puzzle_groups, exists(PuzzleGroup.puzzles, Puzzle.completed))
        return select(Classroom).where(predicate).order_by(Classroom.id).limit(1)

    @staticmethod
    def all_groups_all_completed_statement() -> Select[tuple[Classroom]]:
        """First classroom where every puzzle group has every puzzle completed."""
        predicate = for_all(Classroom.puzzle_groups, for_all(PuzzleGroup.puzzles, Puzzle.completed))
        return select(Classroom).where(predicate).order_by(Classroom.id).limit(1)

    def first_with_any_completed_puzzle(self) -> Classroom | None:
        return self.session.execute(self.any_group_any_completed_statement()).scalars().first()

    def first_with_all_puzzles_completed(self) -> Classroom | None:
        return self.session.execute(self.all_groups_all_completed_statement()).scalars().first()
