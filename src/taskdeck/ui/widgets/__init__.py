"""Widget components."""

from .column import EmptyColumnMessage, KanbanColumn
from .new_task_modal import NewTaskModal
from .task_card import TaskCard

__all__ = [
    "EmptyColumnMessage",
    "KanbanColumn",
    "NewTaskModal",
    "TaskCard",
]
