# bgplanner/core/game_data.py

"""Field registry for board game records.

Defines the GameData enum of addressable fields, each tagged with a kind
(numeric or text) and the catalogue CSV column it is loaded from. Filter
expressions, sort keys and the CSV loader all resolve field names here.
"""

from __future__ import annotations

from enum import Enum

from bgplanner.core.errors import InvalidFieldError

__all__ = ["FieldKind", "GameData"]


class FieldKind(Enum):
    """Value kind of a GameData field."""

    NUMERIC = "numeric"
    TEXT = "text"


class GameData(Enum):
    """Addressable fields of a BoardGame.

    Each member's value is its canonical token as used in filter
    expressions (``rank<100``, ``minPlayers>=2``).
    """

    NAME = "name"
    ID = "id"
    RATING = "rating"
    DIFFICULTY = "difficulty"
    RANK = "rank"
    MIN_PLAYERS = "minPlayers"
    MAX_PLAYERS = "maxPlayers"
    MIN_TIME = "minPlayTime"
    MAX_TIME = "maxPlayTime"
    YEAR = "year"

    @property
    def kind(self) -> FieldKind:
        """The value kind of this field."""
        return FieldKind.TEXT if self is GameData.NAME else FieldKind.NUMERIC

    @property
    def is_numeric(self) -> bool:
        return self.kind is FieldKind.NUMERIC

    @property
    def column_name(self) -> str:
        """Header of the catalogue CSV column holding this field."""
        return _COLUMN_NAMES[self]

    @classmethod
    def from_string(cls, token: str) -> GameData:
        """Resolves a field from its canonical token or CSV column header.

        Matching is case-sensitive and ignores surrounding whitespace.

        Args:
            token: Field token such as ``"rank"`` or ``"yearpublished"``.

        Returns:
            The matching GameData member.

        Raises:
            InvalidFieldError: If no field matches the token.
        """
        stripped = token.strip() if isinstance(token, str) else token
        for member in cls:
            if stripped == member.value or stripped == _COLUMN_NAMES[member]:
                return member
        raise InvalidFieldError(f"No field named {token!r}")


# BoardGameGeek collection export headers
_COLUMN_NAMES: dict[GameData, str] = {
    GameData.NAME: "objectname",
    GameData.ID: "objectid",
    GameData.RATING: "average",
    GameData.DIFFICULTY: "avgweight",
    GameData.RANK: "rank",
    GameData.MIN_PLAYERS: "minplayers",
    GameData.MAX_PLAYERS: "maxplayers",
    GameData.MIN_TIME: "minplaytime",
    GameData.MAX_TIME: "maxplaytime",
    GameData.YEAR: "yearpublished",
}
