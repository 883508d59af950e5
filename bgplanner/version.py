"""
Central version management for Board Game Planner.
"""

from __future__ import annotations

__all__ = ["__app_name__", "__version__", "__release_date__", "__license__"]

__app_name__ = "Board Game Planner"
__version__ = "1.0.0"
__release_date__ = "2026-10-17"
__license__ = "MIT"
