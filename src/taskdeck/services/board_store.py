"""Service owning the current board value."""

from __future__ import annotations

import logging
import threading

from ..engine import insert_task, move_task
from ..errors import BoardError
from ..models import COLUMN_IDS, Board, InsertRequest, Location, MoveRequest, Task
from ..utils import IdFactory, new_task_id

logger = logging.getLogger(__name__)


class BoardStore:
    """Holds the current Board and replaces it after every accepted request.

    The read-compute-replace sequence runs under a lock, so requests from
    different threads are applied one at a time against the latest board.
    """

    def __init__(self, board: Board, id_factory: IdFactory = new_task_id) -> None:
        self._board = board
        self._id_factory = id_factory
        self._lock = threading.RLock()

    @property
    def board(self) -> Board:
        """The current board."""
        return self._board

    def move(self, request: MoveRequest) -> Board:
        """Apply a move request and return the new current board."""
        with self._lock:
            before = self._board
            try:
                after = move_task(before, request)
            except BoardError as e:
                logger.warning("Move rejected: %s", e)
                raise
            self._board = after

        if after is not before and request.destination is not None:
            moved = after.column(request.destination.column_id).tasks[request.destination.index]
            logger.info(
                "Task moved: %s (%s[%d] -> %s[%d])",
                moved.id,
                request.source.column_id,
                request.source.index,
                request.destination.column_id,
                request.destination.index,
            )
        return after

    def insert(self, request: InsertRequest) -> Task | None:
        """
        Apply an insert request.

        Returns:
            The created task, or None if the title was blank
        """
        with self._lock:
            before = self._board
            try:
                after = insert_task(before, request, self._id_factory)
            except BoardError as e:
                logger.warning("Insert rejected: %s", e)
                raise
            self._board = after

        if after is before:
            return None

        task = after.column(request.column_id).tasks[-1]
        logger.info("Task created: %s in %s", task.id, request.column_id)
        return task

    def reorder_task(self, column_id: str, index: int, delta: int) -> Location | None:
        """
        Move a task up or down within its column.

        Args:
            column_id: Column holding the task
            index: Current position of the task
            delta: -1 to move up, 1 to move down

        Returns:
            The task's new location, or None if it is already at the boundary
        """
        new_index = index + delta
        with self._lock:
            size = len(self._board.column(column_id).tasks)
            if new_index < 0 or new_index >= size:
                logger.debug("reorder_task: at boundary, cannot move: %s[%d]", column_id, index)
                return None
            self.move(MoveRequest.between(column_id, index, column_id, new_index))
        return Location(column_id=column_id, index=new_index)

    def shift_task(self, column_id: str, index: int, delta: int) -> Location | None:
        """
        Move a task to the tail of the previous (-1) or next (1) column.

        Returns:
            The task's new location, or None if there is no column that way
        """
        with self._lock:
            position = COLUMN_IDS.index(self._board.column(column_id).id) + delta
            if position < 0 or position >= len(COLUMN_IDS):
                logger.debug("shift_task: no column beyond %s", column_id)
                return None
            target = COLUMN_IDS[position]
            dest_index = len(self._board.column(target).tasks)
            self.move(MoveRequest.between(column_id, index, target, dest_index))
        return Location(column_id=target, index=dest_index)
