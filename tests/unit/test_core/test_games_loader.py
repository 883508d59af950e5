# tests/unit/test_core/test_games_loader.py

"""Tests for the catalogue CSV loader."""

from __future__ import annotations

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
import requests

from bgplanner.core.errors import CatalogueLoadError
from bgplanner.core.games_loader import load_games, parse_games_csv
from bgplanner.utils.paths import get_sample_collection

CSV_HEADER = "objectname,objectid,average,avgweight,minplayers,maxplayers,minplaytime,maxplaytime,yearpublished,rank"


class TestParseGamesCsv:
    """Tests for parse_games_csv()."""

    def test_parses_all_columns(self) -> None:
        text = f"{CSV_HEADER}\nChess,171,7.21,3.70,2,2,60,60,1475,419\n"
        (chess,) = parse_games_csv(text)

        assert chess.name == "Chess"
        assert chess.id == 171
        assert chess.rating == pytest.approx(7.21)
        assert chess.difficulty == pytest.approx(3.70)
        assert chess.min_players == 2
        assert chess.max_players == 2
        assert chess.min_play_time == 60
        assert chess.max_play_time == 60
        assert chess.year_published == 1475
        assert chess.rank == 419

    def test_column_order_does_not_matter(self) -> None:
        text = (
            "rank,yearpublished,maxplaytime,minplaytime,maxplayers,minplayers,avgweight,average,objectid,objectname\n"
            "419,1475,60,60,2,2,3.70,7.21,171,Chess\n"
        )
        (chess,) = parse_games_csv(text)
        assert chess.name == "Chess"
        assert chess.rank == 419
        assert chess.year_published == 1475

    def test_extra_columns_are_ignored(self) -> None:
        text = f"{CSV_HEADER},publisher\nChess,171,7.21,3.70,2,2,60,60,1475,419,Public Domain\n"
        assert [g.name for g in parse_games_csv(text)] == ["Chess"]

    def test_header_whitespace_and_bom(self) -> None:
        header = ", ".join(CSV_HEADER.split(","))
        text = f"\ufeff{header}\nGo,188,7.62,3.95,2,2,30,180,-2200,258\n"
        (go,) = parse_games_csv(text)
        assert go.name == "Go"
        assert go.year_published == -2200

    def test_quoted_names_with_commas(self) -> None:
        text = f'{CSV_HEADER}\n"Brass: Birmingham, Deluxe",224517,8.60,3.87,2,4,60,120,2018,1\n'
        assert [g.name for g in parse_games_csv(text)] == ["Brass: Birmingham, Deluxe"]

    def test_missing_column_raises(self) -> None:
        with pytest.raises(CatalogueLoadError, match="missing required columns") as exc_info:
            parse_games_csv("objectname,objectid\nChess,171\n", "tiny.csv")
        assert "average" in str(exc_info.value)
        assert "tiny.csv" in str(exc_info.value)

    def test_empty_text_raises(self) -> None:
        with pytest.raises(CatalogueLoadError):
            parse_games_csv("")

    def test_header_only_gives_no_games(self) -> None:
        assert parse_games_csv(f"{CSV_HEADER}\n") == []

    @pytest.mark.parametrize(
        "row",
        [
            "Broken,1,not-a-number,1.0,2,4,30,60,2000,5",
            "Broken,1,7.0,1.0,two,4,30,60,2000,5",
            ",1,7.0,1.0,2,4,30,60,2000,5",
            "Short,1,7.0",
        ],
    )
    def test_bad_rows_are_skipped(self, row: str) -> None:
        text = f"{CSV_HEADER}\n{row}\nGo,188,7.62,3.95,2,2,30,180,-2200,258\n"
        assert [g.name for g in parse_games_csv(text)] == ["Go"]

    def test_bad_row_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        text = f"{CSV_HEADER}\nGo,188,7.62,3.95,2,2,30,180,-2200,258\nBroken,1,x,1.0,2,4,30,60,2000,5\n"
        with caplog.at_level(logging.WARNING, logger="bgplanner.games_loader"):
            parse_games_csv(text, "mini.csv")
        assert "Skipping row 3 of mini.csv" in caplog.text


class TestLoadGamesFromFile:
    """Tests for load_games() with file paths."""

    def test_loads_file_in_order(self, collection_csv: Path) -> None:
        games = load_games(collection_csv)
        assert [g.name for g in games] == ["Chess", "Go", "Pandemic Legacy: Season 1"]

    def test_accepts_string_path(self, collection_csv: Path) -> None:
        assert len(load_games(str(collection_csv))) == 3

    def test_logs_loaded_count(self, collection_csv: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="bgplanner.games_loader"):
            load_games(collection_csv)
        assert "Loaded 3 games" in caplog.text
        assert "Skipping row 4" in caplog.text

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogueLoadError, match="Could not read"):
            load_games(tmp_path / "missing.csv")

    def test_directory_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CatalogueLoadError):
            load_games(tmp_path)

    def test_bundled_sample_collection(self) -> None:
        games = load_games(get_sample_collection())
        names = {g.name for g in games}

        assert len(games) == 20
        assert {"Chess", "Go", "Monopoly", "Azul"} <= names
        monopoly = next(g for g in games if g.name == "Monopoly")
        assert monopoly.rank == 22000
        assert monopoly.year_published == 1935


class TestLoadGamesFromUrl:
    """Tests for load_games() with HTTP(S) sources."""

    URL = "https://example.com/collection.csv"

    @patch("bgplanner.core.games_loader.requests.get")
    def test_download_success(self, mock_get: MagicMock) -> None:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = f"{CSV_HEADER}\nGo,188,7.62,3.95,2,2,30,180,-2200,258\n"
        mock_get.return_value = mock_response

        games = load_games(self.URL, timeout=5.0)

        assert [g.name for g in games] == ["Go"]
        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args == (self.URL,)
        assert kwargs["timeout"] == 5.0
        assert kwargs["headers"]["User-Agent"].startswith("Board Game Planner/")

    @patch("bgplanner.core.games_loader.requests.get")
    def test_url_scheme_is_case_insensitive(self, mock_get: MagicMock) -> None:
        mock_response = MagicMock()
        mock_response.status_code = 200
        mock_response.text = f"{CSV_HEADER}\n"
        mock_get.return_value = mock_response

        assert load_games("HTTP://example.com/c.csv") == []
        mock_get.assert_called_once()

    @patch("bgplanner.core.games_loader.requests.get")
    def test_http_error_status_raises(self, mock_get: MagicMock) -> None:
        mock_response = MagicMock()
        mock_response.status_code = 404
        mock_get.return_value = mock_response

        with pytest.raises(CatalogueLoadError, match="404"):
            load_games(self.URL)

    @patch("bgplanner.core.games_loader.requests.get")
    def test_connection_error_raises(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.ConnectionError("no route to host")

        with pytest.raises(CatalogueLoadError, match="Could not download") as exc_info:
            load_games(self.URL)
        assert isinstance(exc_info.value.__cause__, requests.ConnectionError)

    @patch("bgplanner.core.games_loader.requests.get")
    def test_timeout_raises(self, mock_get: MagicMock) -> None:
        mock_get.side_effect = requests.Timeout("timed out")

        with pytest.raises(CatalogueLoadError):
            load_games(self.URL)
