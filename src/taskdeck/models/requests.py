"""Request descriptors handed to the move/insert engine."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, field_validator

from .task import parse_date


class Location(BaseModel):
    """A position on the board: a column and an index into its tasks."""

    model_config = ConfigDict(frozen=True)

    column_id: str
    index: int


class MoveRequest(BaseModel):
    """A drag-and-drop gesture: take the task at ``source`` and drop it at ``destination``.

    ``destination`` is None when the gesture ended outside any drop target.
    """

    model_config = ConfigDict(frozen=True)

    source: Location
    destination: Location | None = None

    @classmethod
    def between(
        cls,
        source_column_id: str,
        source_index: int,
        dest_column_id: str,
        dest_index: int,
    ) -> MoveRequest:
        """Build a request from flat source/destination fields."""
        return cls(
            source=Location(column_id=source_column_id, index=source_index),
            destination=Location(column_id=dest_column_id, index=dest_index),
        )

    @classmethod
    def cancelled(cls, source_column_id: str, source_index: int) -> MoveRequest:
        """Build a request for a drag released outside every column."""
        return cls(source=Location(column_id=source_column_id, index=source_index))

    @property
    def is_cancelled(self) -> bool:
        """True if the gesture had no destination."""
        return self.destination is None

    @property
    def is_noop(self) -> bool:
        """True if the task would be dropped exactly where it was picked up."""
        return self.destination is not None and self.destination == self.source


class InsertRequest(BaseModel):
    """A new-task form submission targeting a column."""

    model_config = ConfigDict(frozen=True)

    column_id: str
    title: str
    description: str = ""
    due_date: date | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value: object) -> object:
        """Accept dates, ISO strings and the short dd/mm/yy form."""
        return parse_date(value)

    @property
    def clean_title(self) -> str:
        """Title with surrounding whitespace removed."""
        return self.title.strip()
