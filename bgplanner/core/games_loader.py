# bgplanner/core/games_loader.py

"""Catalogue loader for BoardGameGeek-style CSV exports.

Reads a CSV file from disk or downloads it over HTTP(S) and turns each
row into a BoardGame. Columns are matched by the header names registered
in GameData; unknown columns are ignored and malformed rows are skipped.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path

import requests

from bgplanner.core.board_game import BoardGame, field_to_game_attr
from bgplanner.core.errors import CatalogueLoadError
from bgplanner.core.game_data import GameData
from bgplanner.utils.i18n import t
from bgplanner.version import __app_name__, __version__

__all__ = ["load_games", "parse_games_csv"]

logger = logging.getLogger("bgplanner.games_loader")

_URL_PREFIXES = ("http://", "https://")

# Fields parsed with float(); the rest of the numeric fields are int()
_FLOAT_FIELDS: frozenset[GameData] = frozenset({GameData.RATING, GameData.DIFFICULTY})


def _parse_row(row: dict[str, str]) -> BoardGame:
    """Builds a BoardGame from one CSV row.

    Raises:
        ValueError: If a value is missing or cannot be converted.
    """
    kwargs: dict[str, str | int | float] = {}
    for column in GameData:
        raw = row.get(column.column_name)
        if raw is None:
            raise ValueError(f"missing value for {column.column_name}")
        raw = raw.strip()
        if column is GameData.NAME:
            if not raw:
                raise ValueError("empty name")
            kwargs[field_to_game_attr(column)] = raw
        elif column in _FLOAT_FIELDS:
            kwargs[field_to_game_attr(column)] = float(raw)
        else:
            kwargs[field_to_game_attr(column)] = int(raw)
    return BoardGame(**kwargs)


def parse_games_csv(text: str, source: str = "<string>") -> list[BoardGame]:
    """Parses catalogue CSV text into games.

    Args:
        text: CSV content with a header row.
        source: Label used in log messages.

    Returns:
        Games in file order. Rows that fail to parse are skipped.

    Raises:
        CatalogueLoadError: If the header lacks a required column.
    """
    reader = csv.DictReader(io.StringIO(text.lstrip("\ufeff")))
    header = [name.strip() for name in (reader.fieldnames or [])]
    reader.fieldnames = header

    missing = [column.column_name for column in GameData if column.column_name not in header]
    if missing:
        raise CatalogueLoadError(t("logs.loader.missing_columns", source=source, columns=", ".join(missing)))

    games: list[BoardGame] = []
    for row in reader:
        try:
            games.append(_parse_row(row))
        except ValueError as exc:
            logger.warning(t("logs.loader.bad_row", source=source, line=reader.line_num, error=exc))

    logger.info(t("logs.loader.loaded", count=len(games), source=source))
    return games


def _download(url: str, timeout: float) -> str:
    """Fetches catalogue text from a URL.

    Raises:
        CatalogueLoadError: On network errors or a non-200 response.
    """
    headers = {"User-Agent": f"{__app_name__}/{__version__}"}
    try:
        response = requests.get(url, headers=headers, timeout=timeout)
    except requests.RequestException as exc:
        raise CatalogueLoadError(t("logs.loader.download_error", url=url, error=exc)) from exc

    if response.status_code != 200:
        raise CatalogueLoadError(t("logs.loader.http_status", url=url, status=response.status_code))

    return response.text


def load_games(source: str | Path, timeout: float = 10.0) -> list[BoardGame]:
    """Loads the game catalogue from a file path or an HTTP(S) URL.

    Args:
        source: Path to a CSV file, or a URL starting with http:// or https://.
        timeout: Network timeout in seconds for URLs.

    Returns:
        The loaded games in file order.

    Raises:
        CatalogueLoadError: If the source cannot be read or lacks required columns.
    """
    source_str = str(source)

    if source_str.lower().startswith(_URL_PREFIXES):
        return parse_games_csv(_download(source_str, timeout), source_str)

    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8-sig", newline="") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogueLoadError(t("logs.loader.read_error", source=path, error=exc)) from exc

    return parse_games_csv(text, str(path))
