import random
import time
from typing import Optional, Tuple

from sudokugen.common.constants import DEFAULT_FILL_STRATEGY, EMPTY
from sudokugen.common.exceptions import GenerationFailure, InvalidRemovalCount
from sudokugen.core import FILL_STRATEGIES
from sudokugen.core.fill import FillStrategy
from sudokugen.core.judge import SudokuJudge
from sudokugen.core.validator import Grid, box_size_of
from sudokugen.core.validator import is_valid as check_cell
from sudokugen.utils.log import get_logger


def make_empty_grid(size: int) -> Grid:
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def copy_grid(source: Grid, destination: Grid) -> None:
    """Copy `source` into `destination` cell by cell, keeping the destination rows."""
    for r, row in enumerate(source):
        for c, value in enumerate(row):
            destination[r][c] = value


def clear_grid(grid: Grid) -> None:
    for row in grid:
        for c in range(len(row)):
            row[c] = EMPTY


def count_filled(grid: Grid) -> int:
    return sum(1 for row in grid for value in row if value != EMPTY)


class SudokuGenerator:
    """
    Sudoku puzzle generator using randomized backtracking.

    Features:
    - Supports arbitrary square sizes (9x9 is the classic board, 4x4 works too)
    - Generates a fully solved board first
    - Clears a fixed number of cells from a copy to create the puzzle
    - Draws every random choice from an injected `random.Random`, so a fixed
      seed reproduces the same puzzle
    """

    def __init__(
        self,
        size: int = 9,
        box: Optional[int] = None,
        rng: Optional[random.Random] = None,
        fill_strategy: str = DEFAULT_FILL_STRATEGY,
    ):
        """
        Initialize the generator.

        Args:
            size (int): Size of the Sudoku board (must be a perfect square).
            box (int): Subgrid size, `box * box` must equal `size`.
            rng (random.Random): Random source, a freshly seeded one if omitted.
            fill_strategy (str): Name of a registered fill strategy.
        """
        self.size = size
        self.box = box if box is not None else box_size_of(size)
        assert self.box * self.box == size, "Box size squared must equal the board size"
        self.rng = rng if rng is not None else random.Random()
        self.fill_strategy_name = fill_strategy
        strategy_cls = FILL_STRATEGIES.get(fill_strategy)
        self.filler: FillStrategy = strategy_cls(box=self.box, rng=self.rng)
        self.logger = get_logger(__name__)

    def is_valid(self, grid: Grid, row: int, col: int, value: int) -> bool:
        return check_cell(grid, row, col, value, self.box)

    def fill_board(self, grid: Grid) -> bool:
        """
        Fill every empty cell of `grid` in place.

        Args:
            grid (list[list[int]]): Board to fill, pre-filled cells are kept.

        Returns:
            bool: True if the board is completely filled, False if no valid
                assignment exists or the pre-filled cells already conflict.
                On False the grid is back to its input state.
        """
        if not SudokuJudge.is_valid(grid):
            self.logger.warning("Pre-filled cells break a row, column or subgrid constraint.")
            return False
        return self.filler.fill(grid)

    def empty_cells(self, grid: Grid, count: int) -> None:
        """
        Clear exactly `count` distinct filled cells of `grid` in place.

        Coordinates are drawn uniformly and redrawn when they hit a cell that
        is already empty.

        Raises:
            InvalidRemovalCount: `count` is negative or larger than the number
                of filled cells, which would make the draw loop run forever.
        """
        available = count_filled(grid)
        if count < 0 or count > available:
            raise InvalidRemovalCount(count, available)

        removed = 0
        while removed < count:
            r = self.rng.randrange(self.size)
            c = self.rng.randrange(self.size)
            if grid[r][c] != EMPTY:
                grid[r][c] = EMPTY
                removed += 1

    def board_setup(self, puzzle: Grid, solution: Grid, removal_count: int) -> None:
        """
        Generate a new solution into `solution` and derive `puzzle` from it.

        Both grids are overwritten in place.

        Raises:
            InvalidRemovalCount: `removal_count` is outside 0..size*size.
            GenerationFailure: the fill found no assignment; `solution` is
                left empty and `puzzle` untouched.
        """
        if removal_count < 0 or removal_count > self.size * self.size:
            raise InvalidRemovalCount(removal_count, self.size * self.size)

        clear_grid(solution)
        start = time.perf_counter()
        if not self.fill_board(solution):
            self.logger.error(
                f"Failed to generate a complete {self.size}x{self.size} board "
                f"with the `{self.fill_strategy_name}` fill strategy."
            )
            raise GenerationFailure(f"Failed to generate a complete {self.size}x{self.size} board.")
        self.logger.debug(
            f"Filled {self.size}x{self.size} board in {time.perf_counter() - start:.4f}s "
            f"using `{self.fill_strategy_name}`."
        )

        copy_grid(solution, puzzle)
        self.empty_cells(puzzle, removal_count)

    def generate(self, removal_count: int) -> Tuple[Grid, Grid]:
        """
        Generate a Sudoku puzzle and its solution as new grids.

        Returns:
            tuple: (puzzle, solution), where puzzle contains zeros for empty cells.
        """
        puzzle = make_empty_grid(self.size)
        solution = make_empty_grid(self.size)
        self.board_setup(puzzle, solution, removal_count)
        return puzzle, solution
