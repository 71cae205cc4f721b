"""Errors raised by puzzle generation."""


class SudokuError(Exception):
    """Base class for sudokugen errors."""


class GenerationFailure(SudokuError):
    """The backtracking fill exhausted every candidate at the first cell.

    The solution grid is fully rolled back to empty when this is raised.
    """


class InvalidRemovalCount(SudokuError, ValueError):
    """The number of cells to clear is negative or larger than the cells available."""

    def __init__(self, count: int, available: int):
        self.count = count
        self.available = available
        super().__init__(f"Cannot remove {count} cells, {available} filled cells available.")
