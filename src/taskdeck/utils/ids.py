"""Task id generators.

Ids must never collide with any id already issued on a board, even when
tasks are created in rapid succession.
"""

from __future__ import annotations

import itertools
import uuid
from collections.abc import Callable, Iterable

IdFactory = Callable[[], str]


def new_task_id() -> str:
    """Generate a random task id (uuid4 hex)."""
    return uuid.uuid4().hex


class SequentialIdFactory:
    """
    Issue increasing numeric ids: "1", "2", "3", ...

    Example: a board seeded with ids "1".."8" continues at "9".
    """

    def __init__(self, start: int = 1) -> None:
        if start < 1:
            raise ValueError("start must be >= 1")
        self._counter = itertools.count(start)

    @classmethod
    def after(cls, existing_ids: Iterable[str]) -> SequentialIdFactory:
        """Create a factory whose first id is past every numeric id in existing_ids."""
        highest = max((int(i) for i in existing_ids if i.isascii() and i.isdigit()), default=0)
        return cls(highest + 1)

    def __call__(self) -> str:
        return str(next(self._counter))
