"""taskdeck TUI Application."""

from rich.markup import escape
from textual.app import App
from textual.binding import Binding
from textual.screen import ModalScreen

from .config import Settings
from .errors import BoardError
from .models import InsertRequest, Location, MoveRequest
from .services import BoardStore, SeedService
from .ui.screens.board import BoardScreen
from .ui.widgets import NewTaskModal
from .utils import IdFactory, SequentialIdFactory, new_task_id


class TaskdeckApp(App):
    """taskdeck - three-column terminal task board."""

    TITLE = "taskdeck"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        Binding("g", "nav_first", "First", show=False),
        Binding("G", "nav_last", "Last", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("space", "grab_or_drop", "Grab/Drop", show=True),
        Binding("H", "move_task_left", "Move ←", show=False),
        Binding("L", "move_task_right", "Move →", show=False),
        Binding("shift+left", "move_task_left", "Move ←", show=False),
        Binding("shift+right", "move_task_right", "Move →", show=False),
        Binding("K", "move_task_up", "Move ↑", show=False),
        Binding("J", "move_task_down", "Move ↓", show=False),
        Binding("shift+up", "move_task_up", "Move ↑", show=False),
        Binding("shift+down", "move_task_down", "Move ↓", show=False),
        Binding("escape", "escape", "Back", show=False, priority=True),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        self._init_services()

    def _init_services(self) -> None:
        """Load the seed board and create the store that owns it."""
        self.seed_service = SeedService(self.settings.project_root)

        if self.settings.id_scheme == "uuid":
            board = self.seed_service.load_board(new_task_id)
            id_factory: IdFactory = new_task_id
        else:
            board = self.seed_service.load_board()
            id_factory = SequentialIdFactory.after(board.task_ids())

        self.store = BoardStore(board, id_factory)

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")
        if self.seed_service.has_config_error:
            self.notify(
                f"{escape(str(self.seed_service.config_error))}. Using the default board.",
                severity="warning",
                timeout=6,
            )

    # Navigation actions
    def action_nav_left(self) -> None:
        """Navigate to previous column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(-1)

    def action_nav_right(self) -> None:
        """Navigate to next column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_column(1)

    def action_nav_up(self) -> None:
        """Navigate to previous task."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(-1)

    def action_nav_down(self) -> None:
        """Navigate to next task."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_task(1)

    def action_nav_first(self) -> None:
        """Navigate to first task in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(0)

    def action_nav_last(self) -> None:
        """Navigate to last task in column."""
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.navigate_to_task(-1)

    # Task actions
    def action_new_task(self) -> None:
        """Open the new task form for the current column."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        column_id = screen.current_column_id
        self.push_screen(  # pyrefly: ignore[no-matching-overload]
            NewTaskModal(column_id, self.store.board.column(column_id).title),
            callback=self._handle_new_task,
        )

    def _handle_new_task(self, request: InsertRequest | None) -> None:
        """Insert the submitted task, or do nothing if the form was cancelled."""
        if request is None:
            return

        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        try:
            task = self.store.insert(request)
        except BoardError as e:
            self.notify(escape(str(e)), severity="error")
            return

        if task is None:
            return

        index = len(self.store.board.column(request.column_id).tasks) - 1
        screen.refresh_board(focus=Location(column_id=request.column_id, index=index))
        self.notify(f"Added '{escape(task.title)}'", timeout=2)

    def action_grab_or_drop(self) -> None:
        """Pick up the focused task, or drop the held task at the cursor."""
        screen = self.screen
        if not isinstance(screen, BoardScreen):
            return

        if screen.grabbed_id is None:
            task = screen.get_current_task()
            if task is not None:
                screen.set_grabbed(task.id)
            return

        source = screen.grabbed
        destination = screen.drop_location
        screen.set_grabbed(None)
        if source is None:
            screen.refresh_board()
            return
        self._apply_move(screen, MoveRequest(source=source, destination=destination), destination)

    def action_move_task_left(self) -> None:
        """Move current task to the tail of the previous column."""
        self._shift_current(-1)

    def action_move_task_right(self) -> None:
        """Move current task to the tail of the next column."""
        self._shift_current(1)

    def action_move_task_up(self) -> None:
        """Move current task up in column."""
        self._reorder_current(-1)

    def action_move_task_down(self) -> None:
        """Move current task down in column."""
        self._reorder_current(1)

    def _shift_current(self, delta: int) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen) or screen.get_current_task() is None:
            return

        location = screen.current_location
        try:
            result = self.store.shift_task(location.column_id, location.index, delta)
        except BoardError as e:
            self.notify(escape(str(e)), severity="error")
            screen.refresh_board()
            return

        if result is not None:
            screen.refresh_board(focus=result)
            self.notify(f"Moved to {escape(self.store.board.column(result.column_id).title)}", timeout=2)

    def _reorder_current(self, delta: int) -> None:
        screen = self.screen
        if not isinstance(screen, BoardScreen) or screen.get_current_task() is None:
            return

        location = screen.current_location
        try:
            result = self.store.reorder_task(location.column_id, location.index, delta)
        except BoardError as e:
            self.notify(escape(str(e)), severity="error")
            screen.refresh_board()
            return

        if result is not None:
            screen.refresh_board(focus=result)

    def _apply_move(
        self, screen: BoardScreen, request: MoveRequest, focus: Location | None
    ) -> None:
        """Send a move to the store and redraw, reporting rejected moves."""
        try:
            self.store.move(request)
        except BoardError as e:
            self.notify(escape(str(e)), severity="error")
            screen.refresh_board()
            return
        screen.refresh_board(focus=focus)

    def action_escape(self) -> None:
        """Dismiss a modal, or cancel a grab in progress."""
        screen = self.screen

        if isinstance(screen, ModalScreen):
            screen.dismiss(None)
            return

        if not isinstance(screen, BoardScreen) or screen.grabbed_id is None:
            return

        # Releasing outside any drop target is a cancelled move
        source = screen.grabbed
        screen.set_grabbed(None)
        if source is None:
            screen.refresh_board()
            return
        self._apply_move(screen, MoveRequest(source=source), source)
        self.notify("Move cancelled", timeout=2)


def run(settings: Settings | None = None) -> None:
    """Run the taskdeck application."""
    app = TaskdeckApp(settings)
    app.run()
