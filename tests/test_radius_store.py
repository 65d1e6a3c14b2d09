"""Tests for the file-backed compass radius store."""
import json
import logging

import pytest

from compass_playground.radius_store import DEFAULT_STORAGE_KEY, RadiusStore, StoredRadius, parse_radius


@pytest.fixture
def store_path(tmp_path):
    return tmp_path / "radius.json"


class TestParseRadius:

    @pytest.mark.parametrize("value,expected", [(42, 42.0), (12.5, 12.5), (" 7.25 ", 7.25), ("-3", -3.0)])
    def test_usable_values(self, value, expected):
        assert parse_radius(value) == expected

    @pytest.mark.parametrize("value", ["", "   ", "abc", "NaN", float("nan"), None, True, [5], {"r": 5}])
    def test_unusable_values(self, value):
        assert parse_radius(value) is None


class TestRadiusStore:

    def test_missing_file_loads_nothing(self, store_path):
        assert RadiusStore(store_path).load() is None

    def test_save_then_load(self, store_path):
        store = RadiusStore(store_path)
        assert store.save(80.0, 50.0) is True
        assert store.load() == StoredRadius(80.0, 50.0)
        data = json.loads(store_path.read_text(encoding="utf-8"))
        assert data[DEFAULT_STORAGE_KEY] == {"current_radius": 80.0, "last_radius": 50.0}

    def test_keys_are_independent(self, store_path):
        RadiusStore(store_path, key="a").save(10.0, 5.0)
        RadiusStore(store_path, key="b").save(20.0, 15.0)
        assert RadiusStore(store_path, key="a").load() == StoredRadius(10.0, 5.0)
        assert RadiusStore(store_path, key="b").load() == StoredRadius(20.0, 15.0)

    def test_bare_value_entry(self, store_path):
        store_path.write_text(json.dumps({DEFAULT_STORAGE_KEY: "42"}))
        assert RadiusStore(store_path).load() == StoredRadius(42.0, None)

    @pytest.mark.parametrize("entry", ["", "  ", "nope", None, {"current_radius": ""}, {"last_radius": 5}])
    def test_unusable_entries_are_ignored(self, store_path, entry):
        store_path.write_text(json.dumps({DEFAULT_STORAGE_KEY: entry}))
        assert RadiusStore(store_path).load() is None

    def test_invalid_last_radius_is_dropped(self, store_path):
        store_path.write_text(json.dumps({DEFAULT_STORAGE_KEY: {"current_radius": 30, "last_radius": "x"}}))
        assert RadiusStore(store_path).load() == StoredRadius(30.0, None)

    def test_broken_json_loads_nothing(self, store_path, caplog):
        store_path.write_text("{broken")
        with caplog.at_level(logging.WARNING, logger="compass_playground.radius_store"):
            assert RadiusStore(store_path).load() is None
        assert "Could not read radius store" in caplog.text

    def test_non_object_document_is_ignored(self, store_path):
        store_path.write_text(json.dumps([1, 2, 3]))
        assert RadiusStore(store_path).load() is None

    def test_save_over_broken_file_rewrites_it(self, store_path):
        store_path.write_text("{broken")
        assert RadiusStore(store_path).save(12.0, 10.0)
        assert RadiusStore(store_path).load() == StoredRadius(12.0, 10.0)

    def test_unwritable_location_reports_failure(self, tmp_path, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        store = RadiusStore(blocker / "radius.json")
        with caplog.at_level(logging.WARNING, logger="compass_playground.radius_store"):
            assert store.save(10.0) is False
        assert "Could not save compass radius" in caplog.text

    def test_clear(self, store_path):
        store = RadiusStore(store_path)
        store.save(10.0, 5.0)
        RadiusStore(store_path, key="other").save(1.0, 1.0)
        store.clear()
        assert store.load() is None
        assert RadiusStore(store_path, key="other").load() == StoredRadius(1.0, 1.0)
