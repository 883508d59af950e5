"""
Message catalogue for console text and log messages.

Loads JSON catalogues from the bundled resources:
1. Shared files from resources/i18n/*.json
2. Locale files from resources/i18n/{locale}/*.json, merged over English
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

__all__ = ["I18n", "init_i18n", "t"]

logger = logging.getLogger("bgplanner.i18n")

_FALLBACK_LOCALE = "en"


def _deep_merge(base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
    """Recursively merges ``update`` into a copy of ``base``."""
    result = base.copy()
    for key, value in update.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_json_directory(directory: Path) -> dict[str, Any]:
    """Loads and deep-merges every ``*.json`` file of a directory, sorted by name."""
    merged: dict[str, Any] = {}
    if not directory.is_dir():
        return merged
    for file_path in sorted(directory.glob("*.json")):
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                merged = _deep_merge(merged, json.load(f))
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Error loading i18n file %s: %s", file_path.name, e)
    return merged


class I18n:
    """Looks up messages by dot-notation key for one locale.

    Keys missing from the locale fall back to English; keys missing
    everywhere render as ``[key]``.
    """

    def __init__(self, locale: str = _FALLBACK_LOCALE, i18n_root: Path | None = None) -> None:
        """Loads the catalogues for a locale.

        Args:
            locale: Locale directory name under resources/i18n/.
            i18n_root: Override for the catalogue root (tests).
        """
        if i18n_root is None:
            from bgplanner.utils.paths import get_resources_dir

            i18n_root = get_resources_dir() / "i18n"

        self.locale = locale
        self.i18n_root = i18n_root

        fallback = _deep_merge(
            _load_json_directory(self.i18n_root),
            _load_json_directory(self.i18n_root / _FALLBACK_LOCALE),
        )
        if locale == _FALLBACK_LOCALE:
            self.translations: dict[str, Any] = fallback
        else:
            if not (self.i18n_root / locale).is_dir():
                logger.warning("No catalogue for locale %r, using English", locale)
            self.translations = _deep_merge(fallback, _load_json_directory(self.i18n_root / locale))

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a message by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'cli.help.add').
            **kwargs: Format arguments for string interpolation.

        Returns:
            The formatted message, or '[key]' if not found.
        """
        value: Any = self.translations
        for part in key.split("."):
            value = value.get(part) if isinstance(value, dict) else None
            if value is None:
                return f"[{key}]"

        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value

        return value


_i18n_instance: I18n | None = None


def init_i18n(locale: str = _FALLBACK_LOCALE) -> I18n:
    """Initialize the global i18n instance.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a message using the global i18n instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        The formatted message, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
