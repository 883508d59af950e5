"""
Configuration for Board Game Planner.

Settings come from built-in defaults, then ``settings.json`` in the data
directory, then environment variables (a ``.env`` file is honoured).
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from bgplanner.utils.paths import get_sample_collection

logger = logging.getLogger("bgplanner.config")


__all__ = ["Config", "config"]

# Environment variable -> Config attribute
_ENV_OVERRIDES: dict[str, str] = {
    "BGPLANNER_GAMES_SOURCE": "GAMES_SOURCE",
    "BGPLANNER_LIST_FILE": "LIST_FILE",
    "BGPLANNER_LANGUAGE": "UI_LANGUAGE",
    "BGPLANNER_LOG_LEVEL": "LOG_LEVEL",
}


@dataclass
class Config:
    """
    Central configuration handling for the application.
    Manages the catalogue source, shortlist file, language and log level.
    """

    DATA_DIR: Path = Path.home() / ".bgplanner"
    SETTINGS_FILE: Path | None = None

    GAMES_SOURCE: str = ""
    LIST_FILE: str = "games_list.txt"
    UI_LANGUAGE: str = "en"
    LOG_LEVEL: str = "INFO"
    HTTP_TIMEOUT: float = 10.0

    def __post_init__(self):
        """Resolve defaults, then apply the settings file and the environment."""
        if self.SETTINGS_FILE is None:
            self.SETTINGS_FILE = self.DATA_DIR / "settings.json"

        if not self.GAMES_SOURCE:
            self.GAMES_SOURCE = str(get_sample_collection())

        self._load_settings()

        load_dotenv()
        for env_name, attr in _ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value:
                setattr(self, attr, value)

    def _load_settings(self) -> None:
        """Load settings from JSON file."""
        if not self.SETTINGS_FILE.exists():
            return

        try:
            with open(self.SETTINGS_FILE, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Could not load settings from %s: %s", self.SETTINGS_FILE, e)
            return

        if not isinstance(data, dict):
            logger.error("Ignoring settings file %s: expected a JSON object", self.SETTINGS_FILE)
            return

        self.GAMES_SOURCE = data.get("games_source") or self.GAMES_SOURCE
        self.LIST_FILE = data.get("list_file", self.LIST_FILE)
        self.UI_LANGUAGE = data.get("ui_language", self.UI_LANGUAGE)
        self.LOG_LEVEL = data.get("log_level", self.LOG_LEVEL)

        try:
            self.HTTP_TIMEOUT = float(data.get("http_timeout", self.HTTP_TIMEOUT))
        except (TypeError, ValueError):
            logger.warning("Invalid http_timeout in %s, keeping %s", self.SETTINGS_FILE, self.HTTP_TIMEOUT)


# Global instance
config = Config()
