# bgplanner/services/game_list.py

"""Shortlist of board games with add/remove by selection token.

Selection tokens choose games from a name-sorted candidate list:

- ``all``: every candidate (case-insensitive).
- ``3``: the third candidate (1-based).
- ``2-5``: candidates two to five, inclusive.
- anything else: the candidate whose name matches, ignoring case.

The shortlist saves as plain text, one name per line.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from bgplanner.core.errors import GameListIOError, InvalidSelectionError

if TYPE_CHECKING:
    from bgplanner.core.board_game import BoardGame

__all__ = ["GameList", "select_games"]

logger = logging.getLogger("bgplanner.game_list")

_ALL_TOKEN = "all"
_INDEX_PATTERN = re.compile(r"^\d+$")
_RANGE_PATTERN = re.compile(r"^(\d+)\s*-\s*(\d+)$")


def _name_key(game: BoardGame) -> str:
    return game.name.lower()


def select_games(selection: str, candidates: list[BoardGame]) -> list[BoardGame]:
    """Resolves a selection token against a candidate list.

    Args:
        selection: ``all``, an index, a range ``start-end`` or a game name.
        candidates: Games in display order; indices refer to this order.

    Returns:
        The selected games in candidate order.

    Raises:
        InvalidSelectionError: If the token is empty, out of range or matches no name.
    """
    token = (selection or "").strip()
    if not token:
        raise InvalidSelectionError("Empty selection")

    if token.lower() == _ALL_TOKEN:
        return list(candidates)

    if _INDEX_PATTERN.match(token):
        index = int(token)
        if not 1 <= index <= len(candidates):
            raise InvalidSelectionError(f"Index out of range: {token} (1-{len(candidates)})")
        return [candidates[index - 1]]

    range_match = _RANGE_PATTERN.match(token)
    if range_match:
        start, end = int(range_match.group(1)), int(range_match.group(2))
        if start > end or start < 1 or end > len(candidates):
            raise InvalidSelectionError(f"Invalid range: {token} (1-{len(candidates)})")
        return candidates[start - 1 : end]

    token_lower = token.lower()
    for game in candidates:
        if game.name.lower() == token_lower:
            return [game]
    raise InvalidSelectionError(f"Game not found: {token}")


class GameList:
    """A named selection of board games kept in case-insensitive name order.

    Names are unique ignoring case; adding a game whose name is already
    held keeps the existing entry. Meant for a single owner.
    """

    def __init__(self) -> None:
        """Initializes an empty shortlist."""
        self._games: dict[str, BoardGame] = {}

    def __len__(self) -> int:
        return len(self._games)

    def _sorted_games(self) -> list[BoardGame]:
        return sorted(self._games.values(), key=_name_key)

    def get_game_names(self) -> list[str]:
        """Returns held game names sorted alphabetically, ignoring case."""
        return [game.name for game in self._sorted_games()]

    def count(self) -> int:
        """Returns the number of held games."""
        return len(self._games)

    def clear(self) -> None:
        """Removes every game from the shortlist."""
        self._games.clear()

    def add_to_list(self, selection: str, games: Iterable[BoardGame]) -> None:
        """Adds games chosen by a selection token.

        Indices and ranges refer to ``games`` sorted by name.

        Args:
            selection: Selection token.
            games: Games to choose from, typically the planner's filtered result.

        Raises:
            InvalidSelectionError: If the token selects nothing valid.
        """
        candidates = sorted(games, key=_name_key)
        selected = select_games(selection, candidates)
        for game in selected:
            self._games.setdefault(_name_key(game), game)
        logger.debug("Added %d game(s) for selection %r", len(selected), selection)

    def remove_from_list(self, selection: str) -> None:
        """Removes games chosen by a selection token.

        Indices and ranges refer to the held games as listed by
        ``get_game_names()``.

        Args:
            selection: Selection token.

        Raises:
            InvalidSelectionError: If the token selects nothing valid.
        """
        selected = select_games(selection, self._sorted_games())
        for game in selected:
            self._games.pop(_name_key(game), None)
        logger.debug("Removed %d game(s) for selection %r", len(selected), selection)

    def save_game(self, filename: str | Path) -> Path:
        """Writes the held names to a file, one per line, in sorted order.

        Parent directories are created as needed and an existing file is
        overwritten.

        Args:
            filename: Target file path.

        Returns:
            The path written.

        Raises:
            GameListIOError: If the file cannot be written.
        """
        output_path = Path(filename)
        names = self.get_game_names()
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, "w", encoding="utf-8") as fh:
                for name in names:
                    fh.write(f"{name}\n")
        except OSError as exc:
            raise GameListIOError(f"Error writing to file: {output_path}") from exc

        logger.info("Saved %d games to %s", len(names), output_path)
        return output_path
