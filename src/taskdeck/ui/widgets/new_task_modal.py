"""New task form modal."""

from pydantic import ValidationError
from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label

from ...models import InsertRequest


class NewTaskModal(ModalScreen[InsertRequest | None]):
    """Modal form collecting a new task's fields for one column."""

    DEFAULT_CSS = """
    NewTaskModal {
        align: center middle;
    }

    NewTaskModal > Vertical {
        width: 60;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    NewTaskModal Label {
        width: 100%;
        text-style: bold;
        margin-bottom: 1;
    }

    NewTaskModal Input {
        margin-bottom: 1;
    }

    NewTaskModal .buttons {
        width: 100%;
        height: auto;
        align: center middle;
    }

    NewTaskModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self, column_id: str, column_title: str) -> None:
        super().__init__()
        self.column_id = column_id
        self.column_title = column_title

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label(f"New task in {escape(self.column_title)}")
            yield Input(placeholder="Title", id="title-input")
            yield Input(placeholder="Description (optional)", id="description-input")
            yield Input(placeholder="Due date, YYYY-MM-DD or dd/mm/yy (optional)", id="due-input")
            with Center(classes="buttons"):
                yield Button("Add", id="add", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def build_request(self, title: str, description: str, due: str) -> InsertRequest | None:
        """
        Validate raw form values into an InsertRequest.

        Shows a warning and returns None when the title is blank or the
        due date cannot be parsed.
        """
        if not title.strip():
            self.notify("Title is required", severity="warning", timeout=2)
            return None
        try:
            return InsertRequest(
                column_id=self.column_id,
                title=title,
                description=description.strip(),
                due_date=due,
            )
        except ValidationError:
            self.notify(f"Unrecognized due date: {escape(due)}", severity="warning", timeout=3)
            return None

    def _submit(self) -> None:
        request = self.build_request(
            self.query_one("#title-input", Input).value,
            self.query_one("#description-input", Input).value,
            self.query_one("#due-input", Input).value,
        )
        if request is not None:
            self.dismiss(request)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add":
            self._submit()
        else:
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
