# tests/unit/test_utils/test_paths.py

"""Tests for bundled resource paths."""

from __future__ import annotations

from bgplanner.utils.paths import get_resources_dir, get_sample_collection


class TestPaths:
    """Tests for get_resources_dir() and get_sample_collection()."""

    def test_resources_dir_holds_catalogues(self) -> None:
        resources = get_resources_dir()
        assert resources.is_dir()
        assert (resources / "i18n" / "en" / "cli.json").is_file()
        assert (resources / "i18n" / "logs.json").is_file()

    def test_resources_dir_is_cached(self) -> None:
        assert get_resources_dir() is get_resources_dir()

    def test_sample_collection(self) -> None:
        sample = get_sample_collection()
        assert sample.name == "collection.csv"
        assert sample.read_text(encoding="utf-8").startswith("objectname,objectid,")
