"""Centralized logging configuration for Board Game Planner.

Every module logs through a child of the ``bgplanner`` logger
(``bgplanner.planner``, ``bgplanner.game_list``, ...). Only the entry
point calls ``setup_logging()``; library code never adds handlers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

__all__ = ["logger", "parse_level", "setup_logging"]

logger = logging.getLogger("bgplanner")


def parse_level(name: str | int, default: int = logging.INFO) -> int:
    """Converts a level name such as ``"debug"`` to a logging constant.

    Args:
        name: Level name (any case) or an int level.
        default: Returned when the name is not a known level.

    Returns:
        The numeric logging level.
    """
    if isinstance(name, int):
        return name
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def setup_logging(
    level: int = logging.INFO,
    log_file: Path | None = None,
) -> None:
    """Configure the application logger.

    Console output goes to stderr so it never mixes with console app
    output on stdout.

    Args:
        level: The logging level (default: INFO).
        log_file: Optional path to a log file. If provided, logs will
            also be written to this file at DEBUG level.
    """
    logger.setLevel(level)

    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        return

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
