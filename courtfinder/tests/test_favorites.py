from __future__ import annotations

import json
from pathlib import Path

import pytest

from courtfinder.storage.config import StorageConfig
from courtfinder.storage.favorites import (
    is_favorite,
    load_favorites,
    save_favorites,
    toggle_favorite,
)


@pytest.fixture
def config(tmp_path: Path) -> StorageConfig:
    return StorageConfig(data_dir=tmp_path)


def _write_raw(config: StorageConfig, text: str) -> None:
    config.path_for(config.favorites_key).write_text(text, encoding="utf-8")


class TestLoadFavorites:
    def test_missing_slot(self, config):
        assert load_favorites(config) == []

    def test_returns_stored_ids(self, config):
        _write_raw(config, json.dumps(["1", "3", "5"]))
        assert load_favorites(config) == ["1", "3", "5"]

    def test_filters_non_strings(self, config):
        _write_raw(config, json.dumps(["1", 42, None, "3", {"id": "4"}]))
        assert load_favorites(config) == ["1", "3"]

    def test_corrupt_json(self, config):
        _write_raw(config, "not valid json")
        assert load_favorites(config) == []

    def test_non_list_json(self, config):
        _write_raw(config, json.dumps({"key": "value"}))
        assert load_favorites(config) == []

    def test_empty_file(self, config):
        _write_raw(config, "")
        assert load_favorites(config) == []

    def test_integer_beyond_conversion_limit(self, config):
        _write_raw(config, "[" + "1" * 5000 + ', "a"]')
        assert load_favorites(config) == []

    def test_deeply_nested_arrays(self, config):
        _write_raw(config, "[" * 100000 + "]" * 100000)
        assert load_favorites(config) == []


class TestSaveFavorites:
    def test_round_trip(self, config):
        save_favorites(["1", "2"], config)
        assert load_favorites(config) == ["1", "2"]

    def test_overwrites_previous(self, config):
        save_favorites(["1"], config)
        save_favorites(["2", "3"], config)
        assert load_favorites(config) == ["2", "3"]

    def test_saves_empty_list(self, config):
        save_favorites(["1"], config)
        save_favorites([], config)
        assert load_favorites(config) == []

    def test_creates_data_dir(self, tmp_path):
        config = StorageConfig(data_dir=tmp_path / "nested" / "dir")
        save_favorites(["7"], config)
        assert json.loads(config.path_for(config.favorites_key).read_text()) == ["7"]

    def test_no_temp_files_left_behind(self, config):
        save_favorites(["1"], config)
        assert [p.name for p in config.data_dir.iterdir()] == [f"{config.favorites_key}.json"]


class TestToggleFavorite:
    def test_adds_then_removes(self, config):
        assert toggle_favorite("2", config) == ["2"]
        assert toggle_favorite("5", config) == ["2", "5"]
        assert toggle_favorite("2", config) == ["5"]
        assert load_favorites(config) == ["5"]

    def test_repairs_corrupt_slot(self, config):
        _write_raw(config, "{oops")
        assert toggle_favorite("1", config) == ["1"]
        assert load_favorites(config) == ["1"]


def test_is_favorite():
    assert is_favorite("1", ["1", "2"])
    assert not is_favorite("3", ["1", "2"])
