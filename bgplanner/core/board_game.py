# bgplanner/core/board_game.py

"""BoardGame record used across the planner.

A BoardGame is an immutable catalogue entry. The same instances are shared
by the full catalogue, the planner's working subset and the shortlist;
nothing copies record data.
"""

from __future__ import annotations

from dataclasses import dataclass

from bgplanner.core.errors import InvalidFieldError
from bgplanner.core.game_data import GameData

__all__ = ["BoardGame", "field_to_game_attr"]


@dataclass(frozen=True, eq=False)
class BoardGame:
    """Represents a single board game from the catalogue.

    Equality and hashing are defined over every attribute listed in
    ``_identity()``, the name included. Ordering with ``<`` compares
    names case-insensitively.

    Attributes:
        name: Display name of the game.
        id: Catalogue identifier.
        min_players: Minimum number of players.
        max_players: Maximum number of players.
        min_play_time: Minimum play time in minutes.
        max_play_time: Maximum play time in minutes.
        difficulty: Average difficulty (weight) score.
        rank: Catalogue rank.
        rating: Average user rating.
        year_published: Year of publication.
    """

    name: str
    id: int = 0
    min_players: int = 0
    max_players: int = 0
    min_play_time: int = 0
    max_play_time: int = 0
    difficulty: float = 0.0
    rank: int = 0
    rating: float = 0.0
    year_published: int = 0

    def _identity(self) -> tuple:
        return (
            self.name,
            self.id,
            self.min_players,
            self.max_players,
            self.min_play_time,
            self.max_play_time,
            self.difficulty,
            self.rank,
            self.rating,
            self.year_published,
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, BoardGame):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __lt__(self, other: BoardGame) -> bool:
        if not isinstance(other, BoardGame):
            return NotImplemented
        return self.name.lower() < other.name.lower()

    def get_numeric_value(self, field: GameData | str) -> float:
        """Returns the value of a numeric field.

        Args:
            field: A GameData member or its token.

        Returns:
            The field value as a float.

        Raises:
            InvalidFieldError: If the field is unknown or textual.
        """
        column = _resolve(field)
        if not column.is_numeric:
            raise InvalidFieldError(f"Invalid numeric column: {column.value}")
        return float(getattr(self, _FIELD_TO_ATTR[column]))

    def get_string_value(self, field: GameData | str) -> str:
        """Returns the value of a text field.

        Args:
            field: A GameData member or its token.

        Returns:
            The field value.

        Raises:
            InvalidFieldError: If the field is unknown or numeric.
        """
        column = _resolve(field)
        if column.is_numeric:
            raise InvalidFieldError(f"Invalid string column: {column.value}")
        return getattr(self, _FIELD_TO_ATTR[column])

    def to_string_with_info(self, field: GameData | str) -> str:
        """Formats the name followed by one field value, e.g. ``"Chess (8.70)"``.

        Rating and difficulty use two decimals, play times get a ``min``
        suffix and NAME returns the bare name.

        Args:
            field: A GameData member or its token.

        Returns:
            The formatted string.

        Raises:
            InvalidFieldError: If the field token is unknown.
        """
        column = _resolve(field)
        if column is GameData.NAME:
            return self.name
        value = getattr(self, _FIELD_TO_ATTR[column])
        if column in (GameData.RATING, GameData.DIFFICULTY):
            return f"{self.name} ({value:.2f})"
        if column in (GameData.MIN_TIME, GameData.MAX_TIME):
            return f"{self.name} ({int(value)} min)"
        return f"{self.name} ({int(value)})"


# Maps GameData to the BoardGame attribute holding its value
_FIELD_TO_ATTR: dict[GameData, str] = {
    GameData.NAME: "name",
    GameData.ID: "id",
    GameData.RATING: "rating",
    GameData.DIFFICULTY: "difficulty",
    GameData.RANK: "rank",
    GameData.MIN_PLAYERS: "min_players",
    GameData.MAX_PLAYERS: "max_players",
    GameData.MIN_TIME: "min_play_time",
    GameData.MAX_TIME: "max_play_time",
    GameData.YEAR: "year_published",
}


def _resolve(field: GameData | str) -> GameData:
    if isinstance(field, GameData):
        return field
    return GameData.from_string(field)


def field_to_game_attr(field: GameData) -> str:
    """Maps a GameData member to the BoardGame attribute name."""
    return _FIELD_TO_ATTR[field]
