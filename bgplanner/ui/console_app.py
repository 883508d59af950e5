# bgplanner/ui/console_app.py

"""Interactive console front end for the planner.

Reads one command per line, drives the Planner and the GameList, and
prints results. Input and output streams are injectable so the loop can
run against in-memory buffers.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TextIO, TYPE_CHECKING

from bgplanner.core.errors import GameListIOError, InvalidFieldError, InvalidSelectionError
from bgplanner.core.game_data import GameData
from bgplanner.utils.i18n import t
from bgplanner.version import __app_name__, __version__

if TYPE_CHECKING:
    from bgplanner.core.board_game import BoardGame
    from bgplanner.services.game_list import GameList
    from bgplanner.services.planner import Planner

__all__ = ["ConsoleApp", "parse_sort_clause"]

logger = logging.getLogger("bgplanner.console")

# Trailing "sort <field> [asc|desc]" of a filter command
_SORT_CLAUSE = re.compile(r"(?:^|\s)sort\s+(?P<field>\S+)(?:\s+(?P<direction>asc|desc))?\s*$", re.IGNORECASE)

_DESCENDING = "desc"


def parse_sort_clause(args: str) -> tuple[str, str | None, bool]:
    """Splits filter arguments into expression and sort options.

    Args:
        args: Text after the command, e.g. ``"rank<100 sort year desc"``.

    Returns:
        Tuple of (expression, sort field token or None, ascending).
    """
    match = _SORT_CLAUSE.search(args)
    if not match:
        return args.strip(), None, True
    direction = (match.group("direction") or "").lower()
    return args[: match.start()].strip(), match.group("field"), direction != _DESCENDING


class ConsoleApp:
    """Command loop over a Planner and a GameList.

    Commands: help, filter, sort, list, add, remove, clear, save, exit.
    Selection and save errors are reported and the loop keeps running.
    """

    def __init__(
        self,
        planner: Planner,
        game_list: GameList,
        stdin: TextIO,
        stdout: TextIO,
        default_list_file: str = "games_list.txt",
    ) -> None:
        """Initializes the console.

        Args:
            planner: Query engine holding the catalogue.
            game_list: The shortlist being built.
            stdin: Stream commands are read from.
            stdout: Stream output is written to.
            default_list_file: Target for ``save`` without a file name.
        """
        self._planner = planner
        self._game_list = game_list
        self._stdin = stdin
        self._stdout = stdout
        self._default_list_file = default_list_file
        self._running = False

        self._commands: dict[str, Callable[[str], None]] = {
            "help": self._cmd_help,
            "?": self._cmd_help,
            "filter": self._cmd_filter,
            "sort": self._cmd_sort,
            "list": self._cmd_list,
            "add": self._cmd_add,
            "remove": self._cmd_remove,
            "clear": self._cmd_clear,
            "save": self._cmd_save,
            "exit": self._cmd_exit,
        }

    def _print(self, text: str = "") -> None:
        self._stdout.write(f"{text}\n")

    def run(self) -> None:
        """Runs the loop until ``exit`` or end of input."""
        self._running = True
        self._print(t("cli.welcome", app=__app_name__, version=__version__))

        while self._running:
            self._stdout.write(t("cli.prompt"))
            self._stdout.flush()
            line = self._stdin.readline()
            if not line:
                self._print()
                break
            self.execute(line)

        self._print(t("cli.goodbye"))

    def execute(self, line: str) -> None:
        """Runs a single command line.

        Args:
            line: Raw input such as ``"add 1-3"``.
        """
        stripped = line.strip()
        if not stripped:
            return

        command, _, args = stripped.partition(" ")
        command = command.lower()
        args = args.strip()
        logger.debug(t("logs.console.command", command=command, args=args))

        handler = self._commands.get(command)
        if handler is None:
            self._print(t("cli.invalid_command", command=command))
            return
        handler(args)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @staticmethod
    def _field_names() -> str:
        return ", ".join(field.value for field in GameData)

    def _cmd_help(self, args: str) -> None:
        topic = args.lower()
        if topic in ("filter", "sort"):
            self._print(t(f"cli.help.{topic}", fields=self._field_names()))
        elif topic == "save":
            self._print(t("cli.help.save", default=self._default_list_file))
        elif topic in ("list", "add", "remove", "clear", "help", "exit"):
            self._print(t(f"cli.help.{topic}"))
        else:
            self._print(t("cli.help.general"))

    def _resolve_sort_field(self, token: str | None) -> GameData | None:
        if token is None:
            return GameData.NAME
        try:
            return GameData.from_string(token)
        except InvalidFieldError:
            self._print(t("cli.filter.invalid_sort", field=token, fields=self._field_names()))
            return None

    def _show_games(self, games: list[BoardGame], sort_on: GameData) -> None:
        """Prints games in display order, numbered as ``add`` selects them.

        ``add`` indices refer to the current games sorted by name, so each
        row carries its position in that order whatever the display sort.
        """
        if not games:
            self._print(t("cli.filter.no_results"))
            return
        by_name = sorted(self._planner.current_games, key=lambda g: g.name.lower())
        positions = {game: position for position, game in enumerate(by_name, start=1)}
        self._print(t("cli.filter.count", count=len(games)))
        for game in games:
            self._print(f"{positions[game]}: {game.to_string_with_info(sort_on)}")

    def _cmd_filter(self, args: str) -> None:
        if not args:
            self._planner.reset()
            self._print(t("cli.filter.reset"))
            self._show_games(list(self._planner.filter()), GameData.NAME)
            return

        expression, sort_token, ascending = parse_sort_clause(args)
        sort_on = self._resolve_sort_field(sort_token)
        if sort_on is None:
            return
        self._show_games(list(self._planner.filter(expression, sort_on, ascending)), sort_on)

    def _cmd_sort(self, args: str) -> None:
        if not args:
            self._print(t("cli.help.sort", fields=self._field_names()))
            return
        _, sort_token, ascending = parse_sort_clause(f"sort {args}")
        if sort_token is None:
            self._print(t("cli.help.sort", fields=self._field_names()))
            return
        sort_on = self._resolve_sort_field(sort_token)
        if sort_on is None:
            return
        self._show_games(list(self._planner.filter("", sort_on, ascending)), sort_on)

    def _cmd_list(self, args: str) -> None:
        names = self._game_list.get_game_names()
        if not names:
            self._print(t("cli.list.empty"))
            return
        self._print(t("cli.list.header", count=len(names)))
        for position, name in enumerate(names, start=1):
            self._print(f"{position}: {name}")

    def _cmd_add(self, args: str) -> None:
        if not args:
            self._print(t("cli.add.usage"))
            return
        try:
            self._game_list.add_to_list(args, self._planner.current_games)
        except InvalidSelectionError as exc:
            logger.debug(t("logs.console.selection_error", selection=args, error=exc))
            self._print(t("cli.invalid_selection", error=exc))
            return
        self._print(t("cli.add.done", count=self._game_list.count()))

    def _cmd_remove(self, args: str) -> None:
        if not args:
            self._print(t("cli.remove.usage"))
            return
        try:
            self._game_list.remove_from_list(args)
        except InvalidSelectionError as exc:
            logger.debug(t("logs.console.selection_error", selection=args, error=exc))
            self._print(t("cli.invalid_selection", error=exc))
            return
        self._print(t("cli.remove.done", count=self._game_list.count()))

    def _cmd_clear(self, args: str) -> None:
        self._game_list.clear()
        self._print(t("cli.clear.done"))

    def _cmd_save(self, args: str) -> None:
        target = args or self._default_list_file
        try:
            path = self._game_list.save_game(target)
        except GameListIOError as exc:
            logger.error(t("logs.console.save_error", path=target, error=exc))
            self._print(t("cli.save.error", error=exc))
            return
        self._print(t("cli.save.done", count=self._game_list.count(), path=path))

    def _cmd_exit(self, args: str) -> None:
        self._running = False
