# -*- coding: utf-8 -*-
"""Constants."""

# sudokugen env var names
LOG_LEVEL_ENV_VAR = "SUDOKUGEN_LOG_LEVEL"  # global log level
SEED_ENV_VAR = "SUDOKUGEN_SEED"  # default random seed when none is configured

# board defaults

EMPTY = 0
DEFAULT_BOARD_SIZE = 9
DEFAULT_BOX_SIZE = 3
DEFAULT_REMOVAL_COUNT = 50
DEFAULT_FILL_STRATEGY = "recursive"

QUIT_COMMANDS = ("q", "quit", "exit")
