import math
from typing import List, Optional

Grid = List[List[int]]  # 0 = empty, values 1..N


def box_size_of(size: int) -> int:
    box = math.isqrt(size)
    assert box * box == size, "Size must be a perfect square"
    return box


def is_valid(grid: Grid, row: int, col: int, value: int, box: Optional[int] = None) -> bool:
    """
    Check whether placing `value` at (`row`, `col`) keeps the row, the column
    and the subgrid free of duplicates.

    The scans include the target cell itself, so a filled cell checked
    against its own value is reported invalid. Only call this for cells
    that are being filled from empty.

    Args:
        grid (list[list[int]]): Board state, not modified.
        row (int): 0-indexed row.
        col (int): 0-indexed column.
        value (int): Candidate value in [1, N].
        box (int): Subgrid size, derived from the grid size when omitted.

    Returns:
        bool: True if `value` does not occur in the row, column or subgrid.
    """
    size = len(grid)
    assert 0 <= row < size and 0 <= col < size, f"Cell ({row}, {col}) is off the board"
    assert 1 <= value <= size, f"Value {value} is outside 1..{size}"
    if box is None:
        box = box_size_of(size)

    if value in grid[row]:
        return False

    for r in range(size):
        if grid[r][col] == value:
            return False

    br = (row // box) * box
    bc = (col // box) * box
    for r in range(br, br + box):
        for c in range(bc, bc + box):
            if grid[r][c] == value:
                return False

    return True
