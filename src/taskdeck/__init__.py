"""taskdeck - a three-column task board with drag-and-reorder semantics."""

__version__ = "0.1.0"
