"""Tests for the JSON watched store."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from blepo.domain.exceptions import StoreError
from blepo.infrastructure.storage.json_store import JsonWatchedStore


class TestJsonWatchedStore:
    """Tests for JsonWatchedStore."""

    def test_creates_data_dir(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "nested" / "blepo"
        JsonWatchedStore(data_dir)
        assert data_dir.is_dir()

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert JsonWatchedStore(tmp_path).load_watched() == set()

    def test_mark_and_load(self, tmp_path: Path) -> None:
        store = JsonWatchedStore(tmp_path)
        store.mark_watched("zzz")
        store.mark_watched("aaa")

        assert store.load_watched() == {"aaa", "zzz"}
        assert json.loads((tmp_path / "watched.json").read_text()) == ["aaa", "zzz"]

    def test_mark_twice_is_idempotent(self, tmp_path: Path) -> None:
        store = JsonWatchedStore(tmp_path)
        store.mark_watched("abc")
        store.mark_watched("abc")

        assert json.loads((tmp_path / "watched.json").read_text()) == ["abc"]

    def test_persists_across_instances(self, tmp_path: Path) -> None:
        JsonWatchedStore(tmp_path).mark_watched("abc")
        assert JsonWatchedStore(tmp_path).load_watched() == {"abc"}

    def test_invalid_json(self, tmp_path: Path) -> None:
        (tmp_path / "watched.json").write_text("{not json")
        with pytest.raises(StoreError, match="not valid JSON"):
            JsonWatchedStore(tmp_path).load_watched()

    def test_wrong_shape(self, tmp_path: Path) -> None:
        (tmp_path / "watched.json").write_text('{"abc": true}')
        with pytest.raises(StoreError, match="JSON array"):
            JsonWatchedStore(tmp_path).load_watched()

    def test_no_temp_file_left_behind(self, tmp_path: Path) -> None:
        JsonWatchedStore(tmp_path).mark_watched("abc")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["watched.json"]
