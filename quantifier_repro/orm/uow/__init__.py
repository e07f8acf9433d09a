"""Unit of Work (UoW) pattern implementations for the reproduction.

Provides transaction management and repository coordination:
- BaseUnitOfWork: Abstract base class with common patterns
- ClassroomUnitOfWork: Classroom, PuzzleGroup and Puzzle repositories in one transaction
"""

from quantifier_repro.orm.uow.base import BaseUnitOfWork
from quantifier_repro.orm.uow.classroom_uow import ClassroomUnitOfWork

__all__ = [
    "BaseUnitOfWork",
    "ClassroomUnitOfWork",
]
