"""Move/insert engine.

Pure functions from (Board, request) to Board. Nothing here keeps state
between calls and no input Board is ever modified: every accepted request
yields a freshly built Board, every rejected one raises before anything is
built.
"""

from __future__ import annotations

from .errors import IndexOutOfRange
from .models import Board, InsertRequest, MoveRequest, Task
from .utils import IdFactory, new_task_id


def move_task(board: Board, request: MoveRequest) -> Board:
    """
    Apply a drag-and-drop move.

    Same-column moves remove the task first and then insert it at the
    destination index of the shortened list, so moving index 0 to index 2
    in [A, B, C, D] gives [B, C, A, D]. Cross-column moves insert into the
    destination list as it stood before the removal; an index equal to its
    length appends.

    Returns:
        The unchanged board for a cancelled gesture or a drop onto the
        task's own position, otherwise a new Board.

    Raises:
        UnknownColumn: source or destination column is not a board column
        IndexOutOfRange: source index does not address a task, or the
            destination index is past the end of the target list
    """
    if request.destination is None:
        return board

    source, destination = request.source, request.destination
    source_column = board.column(source.column_id)
    dest_column = board.column(destination.column_id)

    source_tasks = list(source_column.tasks)
    if not 0 <= source.index < len(source_tasks):
        raise IndexOutOfRange(source.column_id, source.index, len(source_tasks))

    if request.is_noop:
        return board

    moved = source_tasks.pop(source.index)

    if source_column.id == dest_column.id:
        _insert_at(source_tasks, destination.index, moved, dest_column.id)
        return board.replace_columns(source_column.with_tasks(source_tasks))

    dest_tasks = list(dest_column.tasks)
    _insert_at(dest_tasks, destination.index, moved, dest_column.id)
    return board.replace_columns(
        source_column.with_tasks(source_tasks),
        dest_column.with_tasks(dest_tasks),
    )


def insert_task(
    board: Board,
    request: InsertRequest,
    id_factory: IdFactory = new_task_id,
) -> Board:
    """
    Append a new task to the tail of a column.

    A title that is empty after trimming is ignored: the board comes back
    unchanged and no id is drawn. Callers that want to tell the user about
    it must check the title themselves.

    Raises:
        UnknownColumn: the target column is not a board column
    """
    column = board.column(request.column_id)

    title = request.clean_title
    if not title:
        return board

    task = Task(
        id=id_factory(),
        title=title,
        description=request.description,
        due_date=request.due_date,
    )
    return board.replace_columns(column.with_tasks((*column.tasks, task)))


def apply_request(
    board: Board,
    request: MoveRequest | InsertRequest,
    id_factory: IdFactory = new_task_id,
) -> Board:
    """Dispatch a request to move_task or insert_task."""
    if isinstance(request, MoveRequest):
        return move_task(board, request)
    if isinstance(request, InsertRequest):
        return insert_task(board, request, id_factory)
    raise TypeError(f"Unsupported request type: {type(request).__name__}")


def _insert_at(tasks: list[Task], index: int, task: Task, column_id: str) -> None:
    """Insert task at index, which may equal len(tasks) to append."""
    if not 0 <= index <= len(tasks):
        raise IndexOutOfRange(column_id, index, len(tasks))
    tasks.insert(index, task)
