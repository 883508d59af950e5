# bgplanner/core/errors.py

"""Exception types raised by the board game planner.

The query engine itself is fail-soft and raises none of these while
filtering; they come from direct record access, the shortlist and the
catalogue loader.
"""

from __future__ import annotations

__all__ = [
    "BoardGamePlannerError",
    "CatalogueLoadError",
    "GameListIOError",
    "InvalidFieldError",
    "InvalidSelectionError",
]


class BoardGamePlannerError(Exception):
    """Base class for all planner errors."""


class InvalidFieldError(BoardGamePlannerError, ValueError):
    """Unknown field token, or a field of the wrong kind for the accessor."""


class InvalidSelectionError(BoardGamePlannerError, ValueError):
    """A selection token matched nothing (bad index, range or name)."""


class GameListIOError(BoardGamePlannerError, OSError):
    """The shortlist could not be written to disk."""


class CatalogueLoadError(BoardGamePlannerError):
    """The game catalogue could not be read or downloaded."""
