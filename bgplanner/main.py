#!/usr/bin/env python3
"""Board Game Planner - Main Entry Point (console version)."""

from __future__ import annotations

import logging
import sys

from bgplanner.config import config
from bgplanner.core.errors import CatalogueLoadError
from bgplanner.core.games_loader import load_games
from bgplanner.core.logging import logger, parse_level, setup_logging
from bgplanner.services.game_list import GameList
from bgplanner.services.planner import Planner
from bgplanner.ui.console_app import ConsoleApp
from bgplanner.utils.i18n import init_i18n, t
from bgplanner.version import __app_name__, __version__

__all__ = ["main"]

_DEBUG_FLAG = "--debug"


def main(argv: list[str] | None = None) -> int:
    """Main application execution flow.

    Usage: ``bgplanner [--debug] [catalogue]`` where ``catalogue`` is a CSV
    path or URL. Without it the configured source is used.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).

    Returns:
        Exit code (0 = success, 1 = catalogue could not be loaded).
    """
    args = list(sys.argv[1:] if argv is None else argv)

    # 1. Initialize language (BEFORE any user-facing output)
    init_i18n(config.UI_LANGUAGE)

    # 2. Setup logging
    level = logging.DEBUG if _DEBUG_FLAG in args else parse_level(config.LOG_LEVEL)
    setup_logging(level)
    positional = [arg for arg in args if arg != _DEBUG_FLAG]

    logger.info(t("logs.main.starting", app=__app_name__, version=__version__))

    # 3. Load the catalogue
    source = positional[0] if positional else config.GAMES_SOURCE
    logger.info(t("logs.main.games_source", source=source))
    try:
        games = load_games(source, timeout=config.HTTP_TIMEOUT)
    except CatalogueLoadError as e:
        logger.error(t("logs.main.load_failed", error=e))
        print(t("cli.load_error", error=e), file=sys.stderr)
        return 1

    # 4. Run the console
    planner = Planner(games)
    game_list = GameList()
    app = ConsoleApp(planner, game_list, sys.stdin, sys.stdout, default_list_file=config.LIST_FILE)
    print(t("cli.loaded", count=len(planner.all_games)))
    app.run()

    logger.info(t("logs.main.finished", count=game_list.count()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
