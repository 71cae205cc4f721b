from typing import Iterable, List

from sudokugen.common.config import Config

Grid = List[List[int]]

SOLVED_9X9 = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]


def get_template_config(**game_overrides) -> Config:
    """Default 9x9 config with colors off and a fixed seed."""
    config = Config()
    config.game.seed = 1234
    config.game.color_output = False
    for key, value in game_overrides.items():
        setattr(config.game, key, value)
    return config.check_and_update()


def empty_grid(size: int = 9) -> Grid:
    return [[0] * size for _ in range(size)]


def units(grid: Grid, box: int) -> Iterable[List[int]]:
    """Yield every row, column and subgrid of `grid`."""
    size = len(grid)
    for row in grid:
        yield list(row)
    for c in range(size):
        yield [grid[r][c] for r in range(size)]
    for br in range(0, size, box):
        for bc in range(0, size, box):
            yield [grid[r][c] for r in range(br, br + box) for c in range(bc, bc + box)]


def is_complete_solution(grid: Grid, box: int) -> bool:
    expected = list(range(1, len(grid) + 1))
    return all(sorted(unit) == expected for unit in units(grid, box))


def zero_cells(grid: Grid) -> set:
    return {(r, c) for r, row in enumerate(grid) for c, v in enumerate(row) if v == 0}


def make_input(answers):
    """Input callable returning `answers` one by one, then raising EOFError."""
    it = iter(answers)

    def _input():
        try:
            return str(next(it))
        except StopIteration:
            raise EOFError

    return _input
