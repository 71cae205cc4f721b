"""Interactive guess loop played against a generated solution."""
from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

from sudokugen.common.config import Config
from sudokugen.common.constants import EMPTY, QUIT_COMMANDS
from sudokugen.core.generator import SudokuGenerator, make_empty_grid
from sudokugen.core.judge import SudokuJudge
from sudokugen.core.validator import Grid
from sudokugen.game.render import Colors, paint, render_board
from sudokugen.utils.log import get_logger

CLEAR_SCREEN = "\033[2J\033[H"


@dataclass
class GameContext:
    """Everything one game owns: configuration, random source and both grids."""

    config: Config
    rng: random.Random
    puzzle: Grid = field(default_factory=list)
    solution: Grid = field(default_factory=list)

    def __post_init__(self):
        size = self.config.board.size
        if not self.puzzle:
            self.puzzle = make_empty_grid(size)
        if not self.solution:
            self.solution = make_empty_grid(size)

    @classmethod
    def from_config(cls, config: Config) -> GameContext:
        """Build a context seeded from the config, drawing and recording a seed if none is set."""
        if config.game.seed is None:
            config.game.seed = random.SystemRandom().randrange(2**32)
        get_logger(__name__).info(
            f"Generating with seed {config.game.seed} and the "
            f"`{config.game.fill_strategy}` fill strategy."
        )
        return cls(config=config, rng=random.Random(config.game.seed))

    @property
    def size(self) -> int:
        return self.config.board.size

    def make_generator(self) -> SudokuGenerator:
        return SudokuGenerator(
            size=self.config.board.size,
            box=self.config.board.box,
            rng=self.rng,
            fill_strategy=self.config.game.fill_strategy,
        )


class GameSession:
    """
    Console front end: shows the puzzle, reads guesses and checks each one
    against the stored solution.

    Input and output go through `input_fn` and `output_fn` so the loop can be
    driven without a terminal.
    """

    def __init__(
        self,
        context: GameContext,
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ):
        self.context = context
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print
        self.color = context.config.game.color_output
        self.generator = context.make_generator()
        self.judge = SudokuJudge()
        self.logger = get_logger(__name__)

    def new_game(self) -> None:
        """Generate a fresh solution and puzzle into the context grids."""
        self.generator.board_setup(
            self.context.puzzle,
            self.context.solution,
            self.context.config.game.removal_count,
        )
        self.logger.info(
            f"New {self.context.size}x{self.context.size} game with "
            f"{self.context.config.game.removal_count} empty cells."
        )
        self.show_board(clear=True)

    def show_board(self, clear: bool = False) -> None:
        text = render_board(self.context.puzzle, self.context.config.board.box, color=self.color)
        if clear and self.color:
            text = CLEAR_SCREEN + text
        self.output_fn(text)

    def _error(self, message: str) -> None:
        self.output_fn(paint(message, Colors.RED, self.color))

    def _ask(self, prompt: str) -> Optional[int]:
        """Read a number in 1..N, re-asking on bad input. None means quit."""
        size = self.context.size
        while True:
            self.output_fn(prompt)
            try:
                raw = self.input_fn()
            except EOFError:
                return None
            raw = raw.strip()
            if raw.lower() in QUIT_COMMANDS:
                return None
            try:
                value = int(raw)
            except ValueError:
                self._error(f"'{raw}' is not a number. Try again.")
                continue
            if 1 <= value <= size:
                return value
            self._error(f"Enter a number between 1 and {size}.")

    def prompt_guess(self) -> Optional[Tuple[int, int, int]]:
        """
        Ask for a row, a column and a number.

        Returns:
            tuple | None: 0-indexed (row, col) and the guessed value, or None
                when the player quits.
        """
        size = self.context.size
        while True:
            row = self._ask(f"Enter the row (1-{size}): ")
            if row is None:
                return None
            col = self._ask(f"Enter the column (1-{size}): ")
            if col is None:
                return None
            if self.context.puzzle[row - 1][col - 1] != EMPTY:
                self._error("Cell already filled. Try again.")
                continue
            value = self._ask(f"Enter the number (1-{size}): ")
            if value is None:
                return None
            return row - 1, col - 1, value

    def apply_guess(self, row: int, col: int, value: int) -> bool:
        """Write `value` into the puzzle if it matches the solution."""
        if value != self.context.solution[row][col]:
            self.logger.debug(f"Wrong guess {value} at ({row}, {col}).")
            return False
        self.context.puzzle[row][col] = value
        return True

    def play(self) -> bool:
        """
        Run the guess loop on the current puzzle.

        Returns:
            bool: True if the puzzle was solved, False if the player quit.
        """
        while not self.judge.is_solved(self.context.puzzle, self.context.solution):
            guess = self.prompt_guess()
            if guess is None:
                self.output_fn("Goodbye!")
                return False
            if self.apply_guess(*guess):
                self.show_board()
            else:
                self.show_board(clear=True)
                self._error("Invalid move. Try again.")

        self.output_fn(paint("Congratulations, the puzzle is solved!", Colors.GREEN, self.color))
        return True

    def run(self) -> bool:
        """Start a new game and play it to the end."""
        self.output_fn("Welcome to Sudoku!")
        self.new_game()
        return self.play()
