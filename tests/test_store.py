"""Tests for config stores"""

import json

import pytest
import toml
import yaml

from modreg.api.exceptions import ConfigurationError
from modreg.config import FileStore, MemoryStore


class TestMemoryStore:
    """Test cases for MemoryStore"""

    def test_load_inserts_default(self):
        """Missing values are created from the default and mark the store dirty"""
        store = MemoryStore()
        assert not store.has_changed()

        assert store.load("general", "size", 3) == 3
        assert store.has_changed()
        assert store.get("general", "size") == 3

    def test_load_existing_value(self):
        """Existing values are returned as-is without dirtying the store"""
        store = MemoryStore({"general": {"size": 9}})
        assert store.load("general", "size", 3) == 9
        assert not store.has_changed()

    def test_set_same_value_is_noop(self):
        """Writing an identical value does not dirty the store"""
        store = MemoryStore({"general": {"size": 9}})
        store.set("general", "size", 9)
        assert not store.has_changed()
        store.set("general", "size", 10)
        assert store.has_changed()

    def test_save_clears_flag(self):
        """Saving resets the dirty flag"""
        store = MemoryStore()
        store.set("general", "size", 1)
        store.save()
        assert not store.has_changed()

    def test_values_are_copied(self):
        """Mutating a loaded list does not change the stored one"""
        store = MemoryStore()
        loaded = store.load("general", "ids", [1, 2])
        loaded.append(3)
        assert store.get("general", "ids") == [1, 2]


class TestFileStore:
    """Test cases for FileStore"""

    @pytest.mark.parametrize(
        "suffix, reader",
        [
            (".toml", toml.load),
            (".yaml", yaml.safe_load),
            (".json", json.load),
        ],
    )
    def test_save_writes_categories(self, tmp_path, suffix, reader):
        """Each supported format is written as one table per category"""
        path = tmp_path / f"mymod{suffix}"
        store = FileStore(path)
        store.load("general", "maxSize", 10)
        store.save()

        with open(path) as f:
            assert reader(f) == {"general": {"maxSize": 10}}

    def test_missing_file_is_empty(self, tmp_path):
        """A store over a missing file starts empty and clean"""
        store = FileStore(tmp_path / "absent.toml")
        assert store.as_dict() == {}
        assert not store.has_changed()

    def test_reload_picks_up_external_edits(self, tmp_path):
        """Changes made to the file by someone else are visible after reload"""
        path = tmp_path / "mymod.json"
        store = FileStore(path)
        store.load("general", "maxSize", 10)
        store.save()

        path.write_text(json.dumps({"general": {"maxSize": 42}}))
        store.reload()
        assert store.load("general", "maxSize", 10) == 42

    def test_unsupported_suffix(self, tmp_path):
        """Unknown file types are rejected on save"""
        store = FileStore(tmp_path / "mymod.ini")
        store.set("general", "size", 1)
        with pytest.raises(ConfigurationError, match="Unsupported"):
            store.save()
