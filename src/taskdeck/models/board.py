"""Board state models."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ..errors import UnknownColumn
from .task import Task

# Fixed column set, in display order
COLUMN_TODO = "to-do"
COLUMN_IN_PROGRESS = "in-progress"
COLUMN_DONE = "done"

COLUMN_IDS: tuple[str, ...] = (COLUMN_TODO, COLUMN_IN_PROGRESS, COLUMN_DONE)

DEFAULT_COLUMN_TITLES: dict[str, str] = {
    COLUMN_TODO: "TO-DO",
    COLUMN_IN_PROGRESS: "IN-PROGRESS",
    COLUMN_DONE: "DONE",
}


def is_column_id(column_id: str) -> bool:
    """Check if column_id belongs to the fixed column set."""
    return column_id in COLUMN_IDS


def require_column_id(column_id: str) -> str:
    """Return column_id unchanged, raising UnknownColumn if it is not a board column."""
    if not is_column_id(column_id):
        raise UnknownColumn(column_id)
    return column_id


class Column(BaseModel):
    """An ordered bucket of tasks. Position in ``tasks`` is display rank."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = Field(..., min_length=1)
    tasks: tuple[Task, ...] = ()

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate the column belongs to the fixed column set."""
        if not is_column_id(v):
            raise ValueError(f"Unknown column ID '{v}', expected one of {', '.join(COLUMN_IDS)}")
        return v

    @property
    def task_ids(self) -> list[str]:
        """Task IDs in display order."""
        return [task.id for task in self.tasks]

    def with_tasks(self, tasks: Iterable[Task]) -> Column:
        """Return a copy of this column holding ``tasks``."""
        return Column(id=self.id, title=self.title, tasks=tuple(tasks))


class Board(BaseModel):
    """Full board state: every fixed column with its ordered tasks.

    A Board is a value. The engine never changes one in place, it builds
    a new Board for every accepted request. ``columns`` is a read-only
    mapping, so the column set cannot be altered after validation.
    """

    model_config = ConfigDict(frozen=True)

    columns: Mapping[str, Column]

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: Mapping[str, Column]) -> Mapping[str, Column]:
        """Validate the column set and task uniqueness, normalizing order."""
        for key, column in v.items():
            if not is_column_id(key):
                raise ValueError(f"Unknown column ID '{key}'")
            if column.id != key:
                raise ValueError(f"Column stored under '{key}' has ID '{column.id}'")

        missing = [column_id for column_id in COLUMN_IDS if column_id not in v]
        if missing:
            raise ValueError(f"Missing columns: {', '.join(missing)}")

        seen: set[str] = set()
        for column in v.values():
            for task in column.tasks:
                if task.id in seen:
                    raise ValueError(f"Duplicate task ID '{task.id}'")
                seen.add(task.id)

        return MappingProxyType({column_id: v[column_id] for column_id in COLUMN_IDS})

    @field_serializer("columns")
    def serialize_columns(self, columns: Mapping[str, Column]) -> dict[str, Column]:
        return dict(columns)

    @classmethod
    def empty(cls) -> Board:
        """Create a board with the three columns and no tasks."""
        return cls.from_tasks({})

    @classmethod
    def from_tasks(
        cls,
        tasks_by_column: Mapping[str, Iterable[Task]],
        titles: Mapping[str, str] | None = None,
    ) -> Board:
        """
        Create a Board from a column ID -> tasks mapping.

        Columns absent from the mapping are created empty. Titles fall back
        to the default column titles.

        Raises:
            UnknownColumn: if the mapping names a column outside the fixed set
        """
        for column_id in tasks_by_column:
            require_column_id(column_id)

        titles = titles or {}
        return cls(
            columns={
                column_id: Column(
                    id=column_id,
                    title=titles.get(column_id) or DEFAULT_COLUMN_TITLES[column_id],
                    tasks=tuple(tasks_by_column.get(column_id, ())),
                )
                for column_id in COLUMN_IDS
            }
        )

    def column(self, column_id: str) -> Column:
        """Get a column by ID, raising UnknownColumn for ids outside the fixed set."""
        return self.columns[require_column_id(column_id)]

    def task_ids(self) -> set[str]:
        """All task IDs on the board."""
        return {task.id for column in self.columns.values() for task in column.tasks}

    @property
    def total_tasks(self) -> int:
        """Number of tasks across all columns."""
        return sum(len(column.tasks) for column in self.columns.values())

    def locate(self, task_id: str) -> tuple[str, int] | None:
        """Find a task's (column_id, index), or None if it is not on the board."""
        for column in self.columns.values():
            for index, task in enumerate(column.tasks):
                if task.id == task_id:
                    return (column.id, index)
        return None

    def layout(self) -> dict[str, list[str]]:
        """Column ID -> task IDs in order."""
        return {column_id: column.task_ids for column_id, column in self.columns.items()}

    def replace_columns(self, *columns: Column) -> Board:
        """Return a new Board with the given columns swapped in."""
        updated = dict(self.columns)
        for column in columns:
            updated[require_column_id(column.id)] = column
        return Board(columns=updated)


def columns_of(board: Board) -> list[Column]:
    """Columns in fixed display order."""
    return list(board.columns.values())


def task_count(board: Board, column_id: str) -> int:
    """Number of tasks in a column.

    Raises:
        UnknownColumn: if column_id is not one of the board's columns
    """
    return len(board.column(column_id).tasks)
