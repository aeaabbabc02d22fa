"""Shared fixtures for board tests."""

import pytest

from taskdeck.models import Board, SeedConfig, Task


def make_board(**columns: list[str]) -> Board:
    """Build a board from task ids per column; keyword names use underscores.

    Example: make_board(to_do=["A", "B"], done=["C"])
    """
    return Board.from_tasks(
        {
            column_id.replace("_", "-"): [Task(id=task_id, title=f"Task {task_id}") for task_id in ids]
            for column_id, ids in columns.items()
        }
    )


def assert_invariants(board: Board) -> None:
    """Every task appears exactly once and the column set is the fixed one."""
    ids = [task.id for column in board.columns.values() for task in column.tasks]
    assert len(ids) == len(set(ids))
    assert list(board.columns) == ["to-do", "in-progress", "done"]
    for column_id, column in board.columns.items():
        assert column.id == column_id


@pytest.fixture
def seed_board() -> Board:
    """The built-in starting board."""
    return SeedConfig.default().to_board()
