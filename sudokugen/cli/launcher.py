"""Launch the Sudoku game or generate a puzzle from the command line."""
import argparse
import sys
from typing import List, Optional

from sudokugen.common.config import Config, load_config
from sudokugen.common.exceptions import SudokuError
from sudokugen.game.render import render_board
from sudokugen.game.session import GameContext, GameSession
from sudokugen.utils.log import get_logger


def build_config(args: argparse.Namespace) -> Config:
    """Load the YAML config (or defaults) and apply command line overrides."""
    config = load_config(args.config) if args.config else Config()
    if args.seed is not None:
        config.game.seed = args.seed
    if args.removal_count is not None:
        config.game.removal_count = args.removal_count
    if args.fill_strategy is not None:
        config.game.fill_strategy = args.fill_strategy
    if args.no_color:
        config.game.color_output = False
    if args.log_level is not None:
        config.log.level = args.log_level
    return config.check_and_update()


def play(config: Config) -> None:
    session = GameSession(GameContext.from_config(config))
    session.run()


def generate(config: Config) -> None:
    context = GameContext.from_config(config)
    context.make_generator().board_setup(
        context.puzzle, context.solution, config.game.removal_count
    )
    color = config.game.color_output
    print("Puzzle:")
    print(render_board(context.puzzle, config.board.box, color=color))
    print("Solution:")
    print(render_board(context.solution, config.board.box, color=color))


def _add_common_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", type=str, default=None, help="Path to the YAML config file.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for generation.")
    parser.add_argument(
        "--removal-count", type=int, default=None, help="Number of cells to clear."
    )
    parser.add_argument(
        "--fill-strategy",
        type=str,
        default=None,
        help="Backtracking fill strategy: `recursive`, `iterative` or a dotted class path.",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors.")
    parser.add_argument("--log-level", type=str, default=None, help="DEBUG, INFO, WARNING, ERROR.")


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sudokugen", description="Terminal Sudoku.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    play_parser = subparsers.add_parser("play", help="Play a generated puzzle.")
    _add_common_args(play_parser)
    play_parser.set_defaults(func=play)

    generate_parser = subparsers.add_parser("generate", help="Print a puzzle and its solution.")
    _add_common_args(generate_parser)
    generate_parser.set_defaults(func=generate)

    args = parser.parse_args(argv)
    logger = get_logger()
    try:
        config = build_config(args)
        logger = get_logger(level=config.log.level)
        args.func(config)
    except (SudokuError, ValueError) as e:
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
