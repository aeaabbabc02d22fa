"""Data models."""

from .board import (
    COLUMN_DONE,
    COLUMN_IDS,
    COLUMN_IN_PROGRESS,
    COLUMN_TODO,
    DEFAULT_COLUMN_TITLES,
    Board,
    Column,
    columns_of,
    task_count,
)
from .requests import InsertRequest, Location, MoveRequest
from .seed_config import SeedColumn, SeedConfig, SeedTask
from .task import Task

__all__ = [
    "COLUMN_DONE",
    "COLUMN_IDS",
    "COLUMN_IN_PROGRESS",
    "COLUMN_TODO",
    "DEFAULT_COLUMN_TITLES",
    "Board",
    "Column",
    "InsertRequest",
    "Location",
    "MoveRequest",
    "SeedColumn",
    "SeedConfig",
    "SeedTask",
    "Task",
    "columns_of",
    "task_count",
]
