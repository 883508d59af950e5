# tests/conftest.py
from __future__ import annotations

from pathlib import Path

import pytest

from bgplanner.core.board_game import BoardGame

CSV_HEADER = "objectname,objectid,average,avgweight,minplayers,maxplayers,minplaytime,maxplaytime,yearpublished,rank"


@pytest.fixture
def shortlist_games() -> list[BoardGame]:
    """Eight games with tricky name ordering ("Go", "Go Fish", "golang", "GoRami")."""
    return [
        BoardGame("17 days", 6, 1, 8, 70, 70, 9.0, 600, 9.0, 2005),
        BoardGame("Chess", 7, 2, 2, 10, 20, 10.0, 700, 10.0, 2006),
        BoardGame("Go", 1, 2, 5, 30, 30, 8.0, 100, 7.5, 2000),
        BoardGame("Go Fish", 2, 2, 10, 20, 120, 3.0, 200, 6.5, 2001),
        BoardGame("golang", 4, 2, 7, 50, 55, 7.0, 400, 9.5, 2003),
        BoardGame("GoRami", 3, 6, 6, 40, 42, 5.0, 300, 8.5, 2002),
        BoardGame("Monopoly", 8, 6, 10, 20, 1000, 1.0, 800, 5.0, 2007),
        BoardGame("Tucano", 5, 10, 20, 60, 90, 6.0, 500, 8.0, 2004),
    ]


@pytest.fixture
def classic_games() -> list[BoardGame]:
    """Chess, Go and Monopoly with distinct ranks and years."""
    return [
        BoardGame("Chess", 1, 2, 2, 10, 30, 3.5, 50, 8.7, 2000),
        BoardGame("Go", 3, 2, 2, 30, 60, 4.5, 10, 9.2, 1990),
        BoardGame("Monopoly", 2, 2, 6, 60, 180, 2.0, 200, 6.5, 1995),
    ]


@pytest.fixture
def collection_csv(tmp_path: Path) -> Path:
    """A small catalogue CSV with one malformed row."""
    path = tmp_path / "collection.csv"
    path.write_text(
        "\n".join(
            [
                CSV_HEADER,
                "Chess,171,7.21,3.70,2,2,60,60,1475,419",
                "Go,188,7.62,3.95,2,2,30,180,-2200,258",
                "Broken,1,not-a-number,1.0,2,4,30,60,2000,5",
                '"Pandemic Legacy: Season 1",161936,8.52,2.83,2,4,60,60,2015,2',
            ]
        )
        + "\n",
        encoding="utf-8",
    )
    return path
