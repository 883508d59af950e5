# bgplanner/services/planner.py

"""Filter-and-sort query engine for the board game catalogue.

The Planner holds the full catalogue and a working subset. Each call to
``filter()`` narrows the working subset further (filters are cumulative
until ``reset()``) and returns the result in a deterministic order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TYPE_CHECKING

from bgplanner.core.errors import InvalidFieldError
from bgplanner.core.game_data import GameData
from bgplanner.services.predicate import Predicate

if TYPE_CHECKING:
    from bgplanner.core.board_game import BoardGame

__all__ = ["Planner", "split_expression"]

logger = logging.getLogger("bgplanner.planner")

_CLAUSE_SEPARATOR = ","

# Sort key per field; every key is a plain attribute read
_SORT_KEYS: dict[GameData, Callable[[BoardGame], Any]] = {
    GameData.NAME: lambda g: g.name.lower(),
    GameData.ID: lambda g: g.id,
    GameData.RATING: lambda g: g.rating,
    GameData.DIFFICULTY: lambda g: g.difficulty,
    GameData.RANK: lambda g: g.rank,
    GameData.MIN_PLAYERS: lambda g: g.min_players,
    GameData.MAX_PLAYERS: lambda g: g.max_players,
    GameData.MIN_TIME: lambda g: g.min_play_time,
    GameData.MAX_TIME: lambda g: g.max_play_time,
    GameData.YEAR: lambda g: g.year_published,
}


def split_expression(expression: str | None) -> list[Predicate]:
    """Splits a comma-separated filter expression into parsed predicates.

    Args:
        expression: Text such as ``"minPlayers>=2, name~=pandemic"``.

    Returns:
        One Predicate per clause, in order. Empty for a blank expression.
    """
    if not expression or not expression.strip():
        return []
    return [Predicate.parse(clause) for clause in expression.split(_CLAUSE_SEPARATOR)]


class Planner:
    """Filters and sorts board games with a cumulative working subset.

    Malformed clauses, unknown fields and unparsable numbers have no
    effect on the result; ``filter()`` never raises for query input.

    A Planner is meant for a single owner. Callers sharing one instance
    across threads must synchronise externally.
    """

    def __init__(self, games: Iterable[BoardGame]) -> None:
        """Initializes the planner with the full catalogue.

        Value-equal duplicates are collapsed, keeping the first occurrence.

        Args:
            games: Every game the planner can ever return.
        """
        self._games: tuple[BoardGame, ...] = tuple(dict.fromkeys(games))
        self._current: list[BoardGame] = list(self._games)
        logger.debug("Planner created with %d games", len(self._games))

    def __len__(self) -> int:
        return len(self._current)

    @property
    def all_games(self) -> tuple[BoardGame, ...]:
        """The full catalogue in its original order."""
        return self._games

    @property
    def current_games(self) -> tuple[BoardGame, ...]:
        """The working subset in catalogue order (unsorted)."""
        return tuple(self._current)

    def filter(
        self,
        expression: str | None = "",
        sort_on: GameData | str = GameData.NAME,
        ascending: bool = True,
    ) -> Iterator[BoardGame]:
        """Narrows the working subset and returns it sorted.

        Clauses are separated by commas and combined with AND; each clause
        is applied to the output of the previous one. The narrowed subset
        replaces the working subset for later calls. A blank expression
        only sorts.

        Args:
            expression: Filter expression, e.g. ``"year>2000,rank<100"``.
            sort_on: Field to sort by. An unknown token leaves the order unsorted.
            ascending: Sort direction.

        Returns:
            A one-shot iterator over the sorted working subset.
        """
        predicates = split_expression(expression)
        if predicates:
            narrowed = self._current
            for predicate in predicates:
                narrowed = self.apply_predicate(narrowed, predicate)
            logger.debug(
                "Filter %r narrowed %d -> %d games",
                expression,
                len(self._current),
                len(narrowed),
            )
            self._current = narrowed

        return iter(self.sort_games(self._current, sort_on, ascending))

    def reset(self) -> None:
        """Discards all narrowing; the working subset becomes the full catalogue."""
        self._current = list(self._games)

    @staticmethod
    def apply_predicate(games: list[BoardGame], predicate: Predicate) -> list[BoardGame]:
        """Keeps the games a single predicate does not reject.

        Args:
            games: Candidate games.
            predicate: Parsed clause; an inert clause keeps every game.

        Returns:
            A new list with the surviving games in their original order.
        """
        if predicate.is_inert:
            return list(games)
        return [game for game in games if predicate.evaluate(game).passes]

    @staticmethod
    def sort_games(games: Iterable[BoardGame], sort_on: GameData | str, ascending: bool = True) -> list[BoardGame]:
        """Sorts games by a field using a stable sort.

        Games with equal keys keep their relative order in both directions.

        Args:
            games: Games to sort.
            sort_on: GameData member or token.
            ascending: Sort direction.

        Returns:
            A new list. Unsorted when ``sort_on`` is not a known field.
        """
        if not isinstance(sort_on, GameData):
            try:
                sort_on = GameData.from_string(sort_on)
            except InvalidFieldError:
                logger.debug("Unknown sort field %r, leaving order unchanged", sort_on)
                return list(games)

        return sorted(games, key=_SORT_KEYS[sort_on], reverse=not ascending)
