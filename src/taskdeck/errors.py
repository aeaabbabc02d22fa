"""Board errors raised by the engine and model accessors."""


class BoardError(Exception):
    """Base exception for board state errors."""

    pass


class UnknownColumn(BoardError, KeyError):
    """A request referenced a column outside the fixed column set."""

    def __init__(self, column_id: str) -> None:
        super().__init__(column_id)
        self.column_id = column_id

    def __str__(self) -> str:
        return f"Unknown column: {self.column_id!r}"


class IndexOutOfRange(BoardError, IndexError):
    """A request referenced a position that does not exist in a column."""

    def __init__(self, column_id: str, index: int, size: int) -> None:
        super().__init__(column_id, index, size)
        self.column_id = column_id
        self.index = index
        self.size = size

    def __str__(self) -> str:
        return f"Index {self.index} out of range for column {self.column_id!r} (size {self.size})"
