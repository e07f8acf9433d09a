"""Fixture graphs seeded before the quantified queries run."""

from dataclasses import dataclass

from quantifier_repro.orm.schema import Classroom, Puzzle, PuzzleGroup


@dataclass(frozen=True)
class GroupSpec:
    name: str
    completed: tuple[bool, ...]


@dataclass(frozen=True)
class FixtureSpec:
    """One classroom with an ordered list of puzzle groups and their completion flags."""

    classroom_name: str
    groups: tuple[GroupSpec, ...]

    @property
    def puzzle_count(self) -> int:
        return sum(len(group.completed) for group in self.groups)

    @property
    def expects_any_completed(self) -> bool:
        """Whether some group has some completed puzzle."""
        return any(any(group.completed) for group in self.groups)

    @property
    def expects_all_completed(self) -> bool:
        """Whether every group has every puzzle completed (vacuously true for empty groups)."""
        return all(all(group.completed) for group in self.groups)


DEFAULT_FIXTURE = FixtureSpec(
    classroom_name="test",
    groups=(
        GroupSpec("group1", (True, True)),
        GroupSpec("group2", (True, False)),
    ),
)

ALL_COMPLETED_FIXTURE = FixtureSpec(
    classroom_name="test",
    groups=(
        GroupSpec("group1", (True, True)),
        GroupSpec("group2", (True, True)),
    ),
)

NONE_COMPLETED_FIXTURE = FixtureSpec(
    classroom_name="test",
    groups=(
        GroupSpec("group1", (False, False)),
        GroupSpec("group2", (False, False)),
    ),
)

FIXTURES: dict[str, FixtureSpec] = {
    "default": DEFAULT_FIXTURE,
    "all-completed": ALL_COMPLETED_FIXTURE,
    "none-completed": NONE_COMPLETED_FIXTURE,
}


def build_fixture_graph(spec: FixtureSpec) -> list[Classroom | PuzzleGroup | Puzzle]:
    """Construct the object graph for a fixture.

    Back-references are set at construction, so adding every returned object
    to one session is enough for the flush to fill in the parent ids.

    Returns:
        The classroom, then its groups, then all puzzles, in insertion order.
    """
    classroom = Classroom(name=spec.classroom_name)
    groups = [PuzzleGroup(classroom=classroom, name=group.name) for group in spec.groups]
    puzzles = [
        Puzzle(puzzle_group=group, completed=completed)
        for group, group_spec in zip(groups, spec.groups)
        for completed in group_spec.completed
    ]
    return [classroom, *groups, *puzzles]
