"""Repository module for the reproduction ORM.

This module provides repository classes for data access layer operations.
"""

from quantifier_repro.orm.repository.base import GenericRepository
from quantifier_repro.orm.repository.classroom import ClassroomRepository
from quantifier_repro.orm.repository.puzzle import PuzzleRepository
from quantifier_repro.orm.repository.puzzle_group import PuzzleGroupRepository

__all__ = [
    "ClassroomRepository",
    "GenericRepository",
    "PuzzleGroupRepository",
    "PuzzleRepository",
]
