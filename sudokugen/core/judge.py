from sudokugen.common.constants import EMPTY
from sudokugen.core.validator import Grid, box_size_of


class SudokuJudge:
    """
    Judge Sudoku board state.

    - Works for any perfect-square board (9x9, 4x4, ...)
    - Allows incomplete boards (zeros are treated as empty cells)
    - Checks row, column and sub-grid uniqueness
    """

    @staticmethod
    def _has_duplicates(values) -> bool:
        nums = [v for v in values if v != EMPTY]
        return len(nums) != len(set(nums))

    @staticmethod
    def is_valid(board: Grid) -> bool:
        size = len(board)
        block = box_size_of(size)

        for row in board:
            if SudokuJudge._has_duplicates(row):
                return False

        for c in range(size):
            if SudokuJudge._has_duplicates(board[r][c] for r in range(size)):
                return False

        for br in range(0, size, block):
            for bc in range(0, size, block):
                cells = (
                    board[r][c] for r in range(br, br + block) for c in range(bc, bc + block)
                )
                if SudokuJudge._has_duplicates(cells):
                    return False

        return True

    @staticmethod
    def is_solved(board: Grid, solution: Grid) -> bool:
        return board == solution
