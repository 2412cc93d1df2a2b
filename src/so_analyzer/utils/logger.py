"""Logging for the shared-library analyzer.

Modules log through children of the ``so_analyzer`` logger (see
``get_logger``). The CLI attaches handlers once per run with
``setup_from_config``.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import Config


ROOT_LOGGER = "so_analyzer"
PLAIN_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _stderr_handler(rich_output: bool) -> logging.Handler:
    if not rich_output:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
        return handler

    # Library names and paths go through verbatim
    handler = RichHandler(
        console=Console(stderr=True, emoji=False),
        show_time=False,
        show_path=False,
        markup=False
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    return handler


def _file_handler(log_file: Path) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logger(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    rich_output: bool = True,
    name: str = ROOT_LOGGER
) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to a logger.

    Handlers from an earlier call are closed and replaced, so repeated runs
    in one process do not duplicate output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file that receives a timestamped copy of the log
        rich_output: Use rich formatting on stderr
        name: Logger to configure

    Raises:
        ValueError: The level name is not a logging level
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(_stderr_handler(rich_output))
    if log_file:
        logger.addHandler(_file_handler(log_file))

    return logger


def setup_from_config(config: Config, verbose: bool = False) -> logging.Logger:
    """Configure the package logger from ``logging.*`` settings; verbose forces DEBUG."""
    level = "DEBUG" if verbose else config.log_level
    return setup_logger(level=level, log_file=config.log_file)


def get_logger(name: str) -> logging.Logger:
    """Child of the package logger, e.g. ``so_analyzer.graph_builder``."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
