# -*- coding: utf-8 -*-
"""Configs for sudokugen."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf

from sudokugen.common.constants import (
    DEFAULT_BOARD_SIZE,
    DEFAULT_BOX_SIZE,
    DEFAULT_FILL_STRATEGY,
    DEFAULT_REMOVAL_COUNT,
    SEED_ENV_VAR,
)
from sudokugen.common.exceptions import InvalidRemovalCount
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


@dataclass
class BoardConfig:
    """Configs for the board geometry."""

    size: int = DEFAULT_BOARD_SIZE  # board is size x size
    box: int = DEFAULT_BOX_SIZE  # subgrid is box x box, box * box == size


@dataclass
class GameConfig:
    """Configs for puzzle generation and play."""

    removal_count: int = DEFAULT_REMOVAL_COUNT  # cells cleared from the solution
    # None means a fresh seed per run, unless SUDOKUGEN_SEED is set
    seed: Optional[int] = None
    fill_strategy: str = DEFAULT_FILL_STRATEGY  # `recursive` or `iterative`
    color_output: bool = True


@dataclass
class LogConfig:
    """Configs for logger."""

    level: str = "INFO"  # default log level (DEBUG, INFO, WARNING, ERROR)


@dataclass
class Config:
    """Global Configuration"""

    board: BoardConfig = field(default_factory=BoardConfig)
    game: GameConfig = field(default_factory=GameConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def save(self, config_path: str) -> None:
        """Save config to file."""
        with open(config_path, "w", encoding="utf-8") as f:
            OmegaConf.save(self, f)

    def _check_board(self) -> None:
        if self.board.size <= 0:
            raise ValueError(f"Invalid board size: {self.board.size}")
        if self.board.box * self.board.box != self.board.size:
            raise ValueError(
                f"Invalid box size {self.board.box} for a {self.board.size}x{self.board.size} board, "
                "box * box must equal the board size."
            )
        if (self.board.size, self.board.box) != (DEFAULT_BOARD_SIZE, DEFAULT_BOX_SIZE):
            logger.warning(
                f"Only the {DEFAULT_BOARD_SIZE}x{DEFAULT_BOARD_SIZE} board is fully supported, "
                f"got {self.board.size}x{self.board.size}."
            )

    def _check_game(self) -> None:
        from sudokugen.core import FILL_STRATEGIES

        total = self.board.size * self.board.size
        if self.game.removal_count < 0 or self.game.removal_count > total:
            raise InvalidRemovalCount(self.game.removal_count, total)

        try:
            FILL_STRATEGIES.get(self.game.fill_strategy)
        except (KeyError, ImportError) as e:
            raise ValueError(
                f"Invalid fill strategy: {self.game.fill_strategy}, "
                f"choose from {FILL_STRATEGIES.names()} or a dotted class path"
            ) from e

        if self.game.seed is None and os.environ.get(SEED_ENV_VAR):
            self.game.seed = int(os.environ[SEED_ENV_VAR])
            logger.info(f"Using seed {self.game.seed} from {SEED_ENV_VAR}.")

    def _check_log(self) -> None:
        self.log.level = self.log.level.upper()
        if not isinstance(logging.getLevelName(self.log.level), int):
            raise ValueError(f"Invalid log level: {self.log.level}")

    def check_and_update(self) -> Config:
        """Check and update the config."""
        self._check_board()
        self._check_game()
        self._check_log()
        return self


def load_config(config_path: str) -> Config:
    """Load the configuration from the given path."""
    schema = OmegaConf.structured(Config)
    try:
        yaml_config = OmegaConf.load(config_path)
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration: {e}") from e
