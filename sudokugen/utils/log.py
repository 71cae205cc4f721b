"""Logger helpers."""
import logging
import os
import sys
from typing import Optional, Union

from sudokugen.common.constants import LOG_LEVEL_ENV_VAR

_ROOT_LOGGER_NAME = "sudokugen"
_FORMAT = "[%(asctime)s] [%(levelname)s] [%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _setup_root_logger() -> logging.Logger:
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        # board output goes to stdout, keep logs out of its way
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        root.addHandler(handler)
        root.propagate = False
        root.setLevel(os.environ.get(LOG_LEVEL_ENV_VAR, "INFO").upper())
    return root


def get_logger(
    name: Optional[str] = None, level: Optional[Union[int, str]] = None
) -> logging.Logger:
    """Get a logger under the `sudokugen` hierarchy.

    All loggers share one stderr handler on the package logger. The level
    starts from the `SUDOKUGEN_LOG_LEVEL` environment variable (default
    `INFO`) and is replaced for the whole package when `level` is given.

    Args:
        name (`str`): Logger name, usually `__name__`. `None` returns the
            package logger.
        level (`int` or `str`): Log level for the package.

    Returns:
        `logging.Logger`: the logger.
    """
    root = _setup_root_logger()
    if level is not None:
        root.setLevel(level.upper() if isinstance(level, str) else level)
    if name is None or name == _ROOT_LOGGER_NAME:
        return root
    if not name.startswith(_ROOT_LOGGER_NAME + "."):
        name = f"{_ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
