"""Task card widget."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task


class TaskCard(Widget, can_focus=True):
    """A task card displayed in a column."""

    def __init__(
        self,
        task_data: Task,
        grabbed: bool = False,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._task_data = task_data
        if grabbed:
            self.add_class("grabbed")

    @property
    def task(self) -> Task:  # pyrefly: ignore[bad-override]
        """Get the task for this card."""
        return self._task_data

    def compose(self) -> ComposeResult:
        """Create card layout."""
        yield Static(self._truncate(self._task_data.title, 40), classes="task-title", markup=False)

        if self._task_data.description.strip():
            yield Static(
                self._truncate(self._task_data.description.strip().splitlines()[0], 50),
                classes="task-description",
                markup=False,
            )

        if self._task_data.due_date is not None:
            yield Static(f"[dim]{self._task_data.display_due}[/]", classes="task-due")

    def _truncate(self, text: str, max_len: int) -> str:
        """Truncate text with ellipsis."""
        if len(text) <= max_len:
            return text
        return text[: max_len - 1] + "…"
