"""Path resolution for bundled resources.

Resources (i18n catalogues, the sample collection) ship inside the
``bgplanner`` package, so the same lookup works from a source checkout and
from an installed wheel.
"""

from __future__ import annotations

from pathlib import Path

__all__ = ["get_resources_dir", "get_sample_collection"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Returns:
        Path to ``bgplanner/resources``.

    Raises:
        FileNotFoundError: If the resources directory is missing.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at bgplanner/utils/paths.py -> parent.parent = bgplanner/
    candidate = Path(__file__).resolve().parent.parent / "resources"
    if not candidate.is_dir():
        raise FileNotFoundError(f"Could not locate resources directory: {candidate}")

    _resources_dir = candidate
    return _resources_dir


def get_sample_collection() -> Path:
    """Returns the bundled sample catalogue CSV."""
    return get_resources_dir() / "collection.csv"
