"""Utility functions."""

from .ids import IdFactory, SequentialIdFactory, new_task_id

__all__ = [
    "IdFactory",
    "SequentialIdFactory",
    "new_task_id",
]
