"""Main kanban board screen."""

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from ...models import COLUMN_IDS, Location, Task, columns_of
from ..widgets.column import KanbanColumn


class BoardScreen(Screen):
    """Main kanban board screen with navigation and grab-and-drop."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._current_column = 0
        self._current_task = 0
        self._grabbed_id: str | None = None
        # Cursor is past the last card of the column while holding a task
        self._at_tail = False
        # Pending focus state for deferred focus after refresh
        self._pending_focus: Location | None = None
        self._pending_column = 0
        self._pending_task = 0

    @property
    def column_count(self) -> int:
        """Number of columns."""
        return len(COLUMN_IDS)

    def compose(self) -> ComposeResult:
        """Create the board layout, one column per fixed column."""
        yield Header(show_clock=True)

        with Container(id="board-container"), Horizontal(id="columns"):
            for column in columns_of(self.app.store.board):  # pyrefly: ignore[missing-attribute]
                yield KanbanColumn(
                    title=column.title,
                    column_id=column.id,
                    id=f"column-{column.id}",
                )

        yield Static("", id="grab-status", classes="grab-status-bar")
        yield Footer()

    def on_mount(self) -> None:
        """Load tasks when screen mounts."""
        self.load_tasks()
        self._update_grab_status()
        self.call_after_refresh(self._update_focus)

    def load_tasks(self) -> None:
        """Populate columns from the store's current board."""
        board = self.app.store.board  # pyrefly: ignore[missing-attribute]

        for column in columns_of(board):
            widget = self._get_column(COLUMN_IDS.index(column.id))
            if widget is None:
                self.log.error(f"Missing column widget for {column.id}")
                continue
            widget.set_tasks(list(column.tasks), self._grabbed_id)

    def refresh_board(self, focus: Location | None = None) -> None:
        """
        Refresh the board display.

        Args:
            focus: If provided, focus this position after refresh.
                   If None, preserves current position.
        """
        self._pending_focus = focus
        self._pending_column = self._current_column
        self._pending_task = self._current_task

        self.load_tasks()

        # Double-defer so column cards are mounted before focusing
        self.call_after_refresh(self._schedule_pending_focus)

    def _schedule_pending_focus(self) -> None:
        self.call_after_refresh(self._apply_pending_focus)

    def _apply_pending_focus(self) -> None:
        """Apply pending focus after refresh completes."""
        if self._pending_focus is not None:
            self._current_column = COLUMN_IDS.index(self._pending_focus.column_id)
            self._current_task = self._pending_focus.index
            self._pending_focus = None
            self._leave_tail()
        else:
            self._current_column = min(self._pending_column, self.column_count - 1)
            self._current_task = self._pending_task

        column = self._get_column(self._current_column)
        if column and column.task_count > 0:
            self._current_task = max(0, min(self._current_task, column.task_count - 1))
        else:
            self._current_task = 0

        self._update_focus()

    def navigate_column(self, delta: int) -> None:
        """Navigate between columns."""
        new_column = max(0, min(self._current_column + delta, self.column_count - 1))
        self._leave_tail()

        if new_column != self._current_column:
            self._current_column = new_column
            column = self._get_column(new_column)
            if column and column.task_count > 0:
                self._current_task = min(self._current_task, column.task_count - 1)
            else:
                self._current_task = 0
            self._update_focus()

    def navigate_task(self, delta: int) -> None:
        """Navigate between tasks in current column."""
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        if self._grabbed_id is not None:
            at_last = self._current_task >= column.task_count - 1
            if delta > 0 and at_last and not self._at_tail:
                self._at_tail = True
                self._update_grab_status()
                return
            if delta < 0 and self._at_tail:
                self._leave_tail()
                return

        new_task = max(0, min(self._current_task + delta, column.task_count - 1))

        if new_task != self._current_task:
            self._current_task = new_task
            self._update_focus()

    def navigate_to_task(self, index: int) -> None:
        """Navigate to specific task index (-1 for last)."""
        self._leave_tail()
        column = self._get_column(self._current_column)
        if column is None or column.task_count == 0:
            return

        self._current_task = column.task_count - 1 if index < 0 else min(index, column.task_count - 1)
        self._update_focus()

    def _get_column(self, index: int) -> KanbanColumn | None:
        """Get column widget by index."""
        if index < 0 or index >= self.column_count:
            return None
        try:
            return self.query_one(f"#column-{COLUMN_IDS[index]}", KanbanColumn)
        except Exception:
            return None

    def _update_focus(self) -> None:
        """Update focus to current task."""
        column = self._get_column(self._current_column)
        if column:
            column.focus_task(self._current_task)

    def get_current_task(self) -> Task | None:
        """Get the currently focused task."""
        column = self._get_column(self._current_column)
        if column:
            return column.get_task(self._current_task)
        return None

    @property
    def current_column_id(self) -> str:
        """ID of the column under the cursor."""
        return COLUMN_IDS[self._current_column]

    @property
    def current_location(self) -> Location:
        """Board position under the cursor."""
        return Location(column_id=self.current_column_id, index=self._current_task)

    @property
    def drop_location(self) -> Location:
        """Where a held task lands if dropped now.

        Before the focused card, at the top of an empty column, or after the
        last card when the cursor has moved past it.
        """
        column = self._get_column(self._current_column)
        count = column.task_count if column else 0
        if count == 0:
            index = 0
        elif self._at_tail:
            index = count
            grabbed = self.grabbed
            if grabbed is not None and grabbed.column_id == self.current_column_id:
                # The held task leaves this column before it is reinserted
                index -= 1
        else:
            index = self._current_task
        return Location(column_id=self.current_column_id, index=index)

    # Grab and drop
    @property
    def grabbed_id(self) -> str | None:
        """Id of the task held for a drag, if any."""
        return self._grabbed_id

    @property
    def grabbed(self) -> Location | None:
        """Current position of the held task on the store's board."""
        if self._grabbed_id is None:
            return None
        found = self.app.store.board.locate(self._grabbed_id)  # pyrefly: ignore[missing-attribute]
        if found is None:
            return None
        column_id, index = found
        return Location(column_id=column_id, index=index)

    def set_grabbed(self, task_id: str | None) -> None:
        """Start or end holding a task and redraw the highlight."""
        self._grabbed_id = task_id
        self._at_tail = False
        self._update_grab_status()
        self.load_tasks()
        self.call_after_refresh(self._schedule_refocus)

    def _schedule_refocus(self) -> None:
        self.call_after_refresh(self._update_focus)

    def _leave_tail(self) -> None:
        if self._at_tail:
            self._at_tail = False
            self._update_grab_status()

    def _update_grab_status(self) -> None:
        """Show or hide the grab status bar."""
        try:
            status = self.query_one("#grab-status", Static)
        except Exception:
            return
        if self._grabbed_id is None:
            status.update("")
            status.display = False
        elif self._at_tail:
            status.update("[b]Holding task[/] [dim]- drop at the end of this column, space to drop, Esc to cancel[/]")
            status.display = True
        else:
            status.update("[b]Holding task[/] [dim]- move the cursor, space to drop, Esc to cancel[/]")
            status.display = True
