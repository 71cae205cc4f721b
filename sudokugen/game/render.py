"""Console rendering of boards."""
from typing import List

from sudokugen.common.constants import EMPTY
from sudokugen.core.validator import Grid


class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"


def paint(text: str, color: str, enabled: bool = True) -> str:
    if not enabled:
        return text
    return f"{color}{text}{Colors.RESET}"


def render_board(grid: Grid, box: int, color: bool = True) -> str:
    """
    Render `grid` as text with 1-based row and column labels.

    Example (9x9, color off)::

          | 1 2 3 | 4 5 6 | 7 8 9
        --------------------------
        1 | 5 3   |   7   |
        ...

    Empty cells are shown blank, separators are drawn between subgrids.
    """
    size = len(grid)
    width = len(str(size))
    label_pad = " " * width

    header = label_pad + " "
    for c in range(size):
        if c % box == 0:
            header += "| "
        header += f"{c + 1:>{width}} "
    separator = "-" * len(header)

    lines: List[str] = [paint(header, Colors.GREEN, color), paint(separator, Colors.GREEN, color)]
    for r in range(size):
        if r % box == 0 and r != 0:
            lines.append(paint(separator, Colors.GREEN, color))
        line = paint(f"{r + 1:>{width}} | ", Colors.GREEN, color)
        for c in range(size):
            if c % box == 0 and c != 0:
                line += paint("| ", Colors.GREEN, color)
            value = grid[r][c]
            line += " " * width + " " if value == EMPTY else f"{value:>{width}} "
        lines.append(line)
    return "\n".join(lines)
