"""Randomized backtracking fill strategies."""
import random
from abc import ABC, abstractmethod
from typing import Iterator, List, Tuple

from sudokugen.common.constants import EMPTY
from sudokugen.core.validator import Grid, is_valid


class FillStrategy(ABC):
    """
    Fill every empty cell of a grid with a valid assignment.

    Cells are visited in row-major order, pre-filled cells are kept as they
    are, and the candidates of each empty cell are tried in a random order
    drawn from `rng`, so different seeds give different solutions.
    """

    def __init__(self, box: int, rng: random.Random):
        self.box = box
        self.rng = rng

    def candidates(self, size: int) -> List[int]:
        nums = list(range(1, size + 1))
        self.rng.shuffle(nums)
        return nums

    @abstractmethod
    def fill(self, grid: Grid) -> bool:
        """
        Args:
            grid (list[list[int]]): Board to fill in place.

        Returns:
            bool: True if every cell is filled. On False every cell that was
                empty on input is empty again.
        """


class RecursiveFill(FillStrategy):
    """Place a candidate, recurse into the next cell, undo on failure."""

    def fill(self, grid: Grid) -> bool:
        return self._fill_from(grid, 0, 0)

    def _fill_from(self, grid: Grid, row: int, col: int) -> bool:
        size = len(grid)
        if row == size:
            return True

        if col == size - 1:
            next_row, next_col = row + 1, 0
        else:
            next_row, next_col = row, col + 1

        if grid[row][col] != EMPTY:
            return self._fill_from(grid, next_row, next_col)

        for value in self.candidates(size):
            if is_valid(grid, row, col, value, self.box):
                grid[row][col] = value
                if self._fill_from(grid, next_row, next_col):
                    return True
                grid[row][col] = EMPTY

        return False


class IterativeFill(FillStrategy):
    """
    Same search as `RecursiveFill` driven by an explicit stack of candidate
    iterators. It draws from the random source in the same order, so both
    strategies produce the same grid for the same seed.
    """

    def fill(self, grid: Grid) -> bool:
        size = len(grid)
        cells: List[Tuple[int, int]] = [
            (r, c) for r in range(size) for c in range(size) if grid[r][c] == EMPTY
        ]
        stack: List[Iterator[int]] = []
        index = 0

        while 0 <= index < len(cells):
            if index == len(stack):
                stack.append(iter(self.candidates(size)))
            r, c = cells[index]
            # undo the placement we are backtracking out of
            grid[r][c] = EMPTY
            for value in stack[index]:
                if is_valid(grid, r, c, value, self.box):
                    grid[r][c] = value
                    index += 1
                    break
            else:
                stack.pop()
                index -= 1

        return index == len(cells)
