from __future__ import annotations

from bgplanner.core.board_game import BoardGame
from bgplanner.core.errors import (
    BoardGamePlannerError,
    CatalogueLoadError,
    GameListIOError,
    InvalidFieldError,
    InvalidSelectionError,
)
from bgplanner.core.game_data import FieldKind, GameData

__all__: list[str] = [
    "BoardGame",
    "BoardGamePlannerError",
    "CatalogueLoadError",
    "FieldKind",
    "GameData",
    "GameListIOError",
    "InvalidFieldError",
    "InvalidSelectionError",
]
