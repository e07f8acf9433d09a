"""Tests for quantifier_repro.fixtures module."""

import pytest

from quantifier_repro.fixtures import (
    ALL_COMPLETED_FIXTURE,
    DEFAULT_FIXTURE,
    FIXTURES,
    NONE_COMPLETED_FIXTURE,
    FixtureSpec,
    GroupSpec,
    build_fixture_graph,
)
from quantifier_repro.orm.schema import Classroom, Puzzle, PuzzleGroup


def test_default_fixture_shape():
    assert DEFAULT_FIXTURE.classroom_name == "test"
    assert [group.name for group in DEFAULT_FIXTURE.groups] == ["group1", "group2"]
    assert [group.completed for group in DEFAULT_FIXTURE.groups] == [(True, True), (True, False)]
    assert DEFAULT_FIXTURE.puzzle_count == 4


def test_build_fixture_graph_orders_objects_for_insertion():
    entities = build_fixture_graph(DEFAULT_FIXTURE)

    assert len(entities) == 7
    assert isinstance(entities[0], Classroom)
    assert all(isinstance(entity, PuzzleGroup) for entity in entities[1:3])
    assert all(isinstance(entity, Puzzle) for entity in entities[3:])


def test_build_fixture_graph_sets_back_references():
    classroom, group1, group2, *puzzles = build_fixture_graph(DEFAULT_FIXTURE)

    assert classroom.name == "test"
    assert group1.classroom is classroom
    assert group2.classroom is classroom
    assert classroom.puzzle_groups == [group1, group2]
    assert [p.puzzle_group for p in puzzles] == [group1, group1, group2, group2]
    assert [p.completed for p in puzzles] == [True, True, True, False]
    assert group2.puzzles == puzzles[2:]


def test_ids_are_unassigned_before_save():
    entities = build_fixture_graph(DEFAULT_FIXTURE)

    assert all(entity.id is None for entity in entities)


@pytest.mark.parametrize(
    ("spec", "any_completed", "all_completed"),
    [
        (DEFAULT_FIXTURE, True, False),
        (ALL_COMPLETED_FIXTURE, True, True),
        (NONE_COMPLETED_FIXTURE, False, False),
        (FixtureSpec("empty-groups", (GroupSpec("g", ()),)), False, True),
        (FixtureSpec("no-groups", ()), False, True),
    ],
    ids=["default", "all-completed", "none-completed", "empty-groups", "no-groups"],
)
def test_expected_answers(spec: FixtureSpec, any_completed: bool, all_completed: bool):
    assert spec.expects_any_completed is any_completed
    assert spec.expects_all_completed is all_completed


def test_fixtures_registry():
    assert FIXTURES["default"] is DEFAULT_FIXTURE
    assert set(FIXTURES) == {"default", "all-completed", "none-completed"}
