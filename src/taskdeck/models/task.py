"""Task domain model."""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Short date form used by hand-written seed files, e.g. "12/02/25"
SHORT_DATE_FORMAT = "%d/%m/%y"


class Task(BaseModel):
    """A single work item on the board.

    Fields never change after creation; moving a task only changes which
    column holds it and where.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    description: str = ""
    due_date: date | None = None

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value: object) -> object:
        """Accept dates, ISO strings and the short dd/mm/yy form."""
        return parse_date(value)

    @property
    def display_due(self) -> str:
        """Due date for display, empty when unset."""
        if self.due_date is None:
            return ""
        return self.due_date.strftime(SHORT_DATE_FORMAT)


def parse_date(value: object) -> object:
    """Parse a date from string or pass through."""
    if isinstance(value, datetime):
        return value.date()
    if value is None or isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.strptime(text, SHORT_DATE_FORMAT).date()
        except ValueError as e:
            raise ValueError(f"Unrecognized date: {value!r}") from e
    return value
