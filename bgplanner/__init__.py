"""Board Game Planner: filter, sort and shortlist a board game catalogue."""

from __future__ import annotations

from bgplanner.version import __version__

__all__ = ["__version__"]
