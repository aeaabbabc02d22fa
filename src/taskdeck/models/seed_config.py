"""Configuration models for taskdeck.yml, the board's starting state."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator

from ..utils import IdFactory, SequentialIdFactory
from .board import COLUMN_DONE, COLUMN_IDS, COLUMN_IN_PROGRESS, COLUMN_TODO, Board
from .task import Task, parse_date


class SeedTask(BaseModel):
    """A task listed in the seed file. ``id`` is assigned on load when omitted."""

    id: str | None = None
    title: str = Field(..., min_length=1)
    description: str = ""
    due_date: date | None = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Trim the title and reject blank ones."""
        v = v.strip()
        if not v:
            raise ValueError("Task title cannot be blank")
        return v

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value: object) -> object:
        """Accept dates, ISO strings and the short dd/mm/yy form."""
        return parse_date(value)


class SeedColumn(BaseModel):
    """Starting tasks for one column."""

    id: str
    title: str | None = None
    tasks: list[SeedTask] = Field(default_factory=list)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        """Validate the column is one of the fixed board columns."""
        if v not in COLUMN_IDS:
            raise ValueError(f"Unknown column ID '{v}', expected one of {', '.join(COLUMN_IDS)}")
        return v


class SeedConfig(BaseModel):
    """Root configuration model for taskdeck.yml."""

    version: int = 1
    columns: list[SeedColumn] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[SeedColumn]) -> list[SeedColumn]:
        """Validate column and task ID uniqueness."""
        ids = [col.id for col in v]
        if len(ids) != len(set(ids)):
            raise ValueError("Column IDs must be unique")

        task_ids = [task.id for col in v for task in col.tasks if task.id is not None]
        if len(task_ids) != len(set(task_ids)):
            raise ValueError("Task IDs must be unique across columns")

        return v

    @property
    def task_ids(self) -> list[str]:
        """Explicit task IDs in the file."""
        return [task.id for col in self.columns for task in col.tasks if task.id is not None]

    def to_board(self, id_factory: IdFactory | None = None) -> Board:
        """
        Build the starting Board.

        Tasks without an id draw one from ``id_factory``; by default a
        sequential factory that continues past the explicit numeric ids.
        """
        if id_factory is None:
            id_factory = SequentialIdFactory.after(self.task_ids)

        tasks_by_column: dict[str, list[Task]] = {}
        titles: dict[str, str] = {}
        for col in self.columns:
            if col.title:
                titles[col.id] = col.title
            tasks_by_column[col.id] = [
                Task(
                    id=seed.id if seed.id is not None else id_factory(),
                    title=seed.title,
                    description=seed.description,
                    due_date=seed.due_date,
                )
                for seed in col.tasks
            ]
        return Board.from_tasks(tasks_by_column, titles)

    @classmethod
    def default(cls) -> SeedConfig:
        """Create the built-in starting board."""
        return cls(
            version=1,
            columns=[
                SeedColumn(
                    id=COLUMN_TODO,
                    title="TO-DO",
                    tasks=[
                        SeedTask(
                            id="1",
                            title="DSA",
                            description="Practice graphs",
                            due_date=date(2025, 2, 2),
                        ),
                        SeedTask(
                            id="2",
                            title="Maths",
                            description="Do 1st unit",
                            due_date=date(2025, 2, 12),
                        ),
                    ],
                ),
                SeedColumn(
                    id=COLUMN_IN_PROGRESS,
                    title="IN-PROGRESS",
                    tasks=[
                        SeedTask(id="3", title="Practice 15 leetcode"),
                        SeedTask(id="4", title="Meet-up with Sam"),
                        SeedTask(id="5", title="Develop a website"),
                    ],
                ),
                SeedColumn(
                    id=COLUMN_DONE,
                    title="DONE",
                    tasks=[
                        SeedTask(id="6", title="Call mom"),
                        SeedTask(id="7", title="Email to FA"),
                        SeedTask(id="8", title="AI assignment"),
                    ],
                ),
            ],
        )
