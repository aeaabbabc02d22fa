"""Tests for app action handlers.

These drive the action methods directly against a real BoardStore and a
mocked board screen, verifying the requests sent and the feedback shown.
"""

from pathlib import Path
from unittest.mock import MagicMock, PropertyMock, patch

import pytest

from conftest import make_board
from taskdeck.app import TaskdeckApp
from taskdeck.config import Settings
from taskdeck.models import InsertRequest, Location, Task
from taskdeck.services import BoardStore
from taskdeck.ui.screens.board import BoardScreen
from taskdeck.ui.widgets.new_task_modal import NewTaskModal
from taskdeck.utils import SequentialIdFactory


@pytest.fixture
def app() -> TaskdeckApp:
    """An app with a small board and no running event loop."""
    app = TaskdeckApp.__new__(TaskdeckApp)
    app.notify = MagicMock()
    board = make_board(to_do=["1", "2"], in_progress=["3"])
    app.store = BoardStore(board, SequentialIdFactory.after(board.task_ids()))
    return app


@pytest.fixture
def screen() -> MagicMock:
    """A board screen with the cursor on the first to-do task."""
    screen = MagicMock(spec=BoardScreen)
    screen.grabbed = None
    screen.grabbed_id = None
    screen.current_column_id = "to-do"
    screen.current_location = Location(column_id="to-do", index=0)
    screen.get_current_task.return_value = Task(id="1", title="1")
    return screen


def _on_screen(screen: MagicMock):
    return patch.object(TaskdeckApp, "screen", new_callable=PropertyMock, return_value=screen)


class TestInitServices:
    """Tests for service wiring from settings."""

    def test_sequential_ids(self, tmp_path: Path):
        app = TaskdeckApp.__new__(TaskdeckApp)
        app.settings = Settings(project_root=tmp_path, id_scheme="sequential")

        app._init_services()

        assert app.store.board.total_tasks == 8
        task = app.store.insert(InsertRequest(column_id="to-do", title="Next"))
        assert task is not None and task.id == "9"

    def test_uuid_ids(self, tmp_path: Path):
        app = TaskdeckApp.__new__(TaskdeckApp)
        app.settings = Settings(project_root=tmp_path, id_scheme="uuid")

        app._init_services()

        task = app.store.insert(InsertRequest(column_id="to-do", title="Next"))
        assert task is not None and len(task.id) == 32


class TestGrabAndDrop:
    """Tests for the space/escape drag emulation."""

    def test_grab_holds_task_id(self, app: TaskdeckApp, screen: MagicMock):
        with _on_screen(screen):
            app.action_grab_or_drop()

        screen.set_grabbed.assert_called_once_with("1")

    def test_grab_on_empty_column_does_nothing(self, app: TaskdeckApp, screen: MagicMock):
        screen.get_current_task.return_value = None

        with _on_screen(screen):
            app.action_grab_or_drop()

        screen.set_grabbed.assert_not_called()

    def test_drop_moves_task(self, app: TaskdeckApp, screen: MagicMock):
        screen.grabbed_id = "1"
        screen.grabbed = Location(column_id="to-do", index=0)
        screen.drop_location = Location(column_id="in-progress", index=1)

        with _on_screen(screen):
            app.action_grab_or_drop()

        assert app.store.board.layout()["in-progress"] == ["3", "1"]
        screen.set_grabbed.assert_called_once_with(None)
        screen.refresh_board.assert_called_once_with(focus=Location(column_id="in-progress", index=1))

    def test_drop_rejected_shows_error(self, app: TaskdeckApp, screen: MagicMock):
        screen.grabbed_id = "9"
        screen.grabbed = Location(column_id="to-do", index=5)
        screen.drop_location = Location(column_id="done", index=0)
        before = app.store.board

        with _on_screen(screen):
            app.action_grab_or_drop()

        assert app.store.board is before
        app.notify.assert_called_once()
        assert app.notify.call_args.kwargs["severity"] == "error"

    def test_drop_without_held_task_on_board(self, app: TaskdeckApp, screen: MagicMock):
        """A held id that no longer resolves sends no move."""
        screen.grabbed_id = "gone"
        screen.drop_location = Location(column_id="done", index=0)
        before = app.store.board

        with _on_screen(screen):
            app.action_grab_or_drop()

        assert app.store.board is before
        screen.set_grabbed.assert_called_once_with(None)
        screen.refresh_board.assert_called_once_with()
        app.notify.assert_not_called()

    def test_escape_cancels_grab(self, app: TaskdeckApp, screen: MagicMock):
        screen.grabbed_id = "2"
        screen.grabbed = Location(column_id="to-do", index=1)
        before = app.store.board

        with _on_screen(screen):
            app.action_escape()

        assert app.store.board is before
        screen.set_grabbed.assert_called_once_with(None)
        app.notify.assert_called_once_with("Move cancelled", timeout=2)

    def test_escape_without_grab_does_nothing(self, app: TaskdeckApp, screen: MagicMock):
        with _on_screen(screen):
            app.action_escape()

        app.notify.assert_not_called()
        screen.refresh_board.assert_not_called()


class TestMoveActions:
    """Tests for the shift-key move actions."""

    def test_move_right_notifies(self, app: TaskdeckApp, screen: MagicMock):
        with _on_screen(screen):
            app.action_move_task_right()

        assert app.store.board.layout()["in-progress"] == ["3", "1"]
        screen.refresh_board.assert_called_once_with(focus=Location(column_id="in-progress", index=1))
        app.notify.assert_called_once_with("Moved to IN-PROGRESS", timeout=2)

    def test_move_left_at_boundary(self, app: TaskdeckApp, screen: MagicMock):
        before = app.store.board

        with _on_screen(screen):
            app.action_move_task_left()

        assert app.store.board is before
        app.notify.assert_not_called()

    def test_move_down(self, app: TaskdeckApp, screen: MagicMock):
        with _on_screen(screen):
            app.action_move_task_down()

        assert app.store.board.layout()["to-do"] == ["2", "1"]
        screen.refresh_board.assert_called_once_with(focus=Location(column_id="to-do", index=1))


class TestNewTask:
    """Tests for the new task flow."""

    def test_handle_new_task_inserts(self, app: TaskdeckApp, screen: MagicMock):
        with _on_screen(screen):
            app._handle_new_task(InsertRequest(column_id="to-do", title="Write tests"))

        assert app.store.board.layout()["to-do"] == ["1", "2", "4"]
        screen.refresh_board.assert_called_once_with(focus=Location(column_id="to-do", index=2))
        app.notify.assert_called_once_with("Added 'Write tests'", timeout=2)

    def test_handle_cancelled_form(self, app: TaskdeckApp, screen: MagicMock):
        before = app.store.board

        with _on_screen(screen):
            app._handle_new_task(None)

        assert app.store.board is before
        screen.refresh_board.assert_not_called()

    def test_modal_rejects_blank_title(self):
        modal = NewTaskModal.__new__(NewTaskModal)
        modal.column_id = "done"
        modal.notify = MagicMock()

        assert modal.build_request("   ", "", "") is None
        modal.notify.assert_called_once_with("Title is required", severity="warning", timeout=2)

    def test_modal_rejects_bad_date(self):
        modal = NewTaskModal.__new__(NewTaskModal)
        modal.column_id = "done"
        modal.notify = MagicMock()

        assert modal.build_request("Ship", "", "soon") is None
        modal.notify.assert_called_once()

    def test_modal_builds_request(self):
        modal = NewTaskModal.__new__(NewTaskModal)
        modal.column_id = "done"
        modal.notify = MagicMock()

        request = modal.build_request("Ship", " notes ", "01/03/25")

        assert request is not None
        assert request.column_id == "done"
        assert request.description == "notes"
        assert request.due_date.month == 3
