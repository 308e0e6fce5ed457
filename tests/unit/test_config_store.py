"""
Unit tests for ConfigStore session and preset persistence.
"""

import json

import pytest

from bytepack.formats.config_store import (
    CONFIG_ENV_VAR,
    PRESETS_KEY,
    SELECTED_PRESET_KEY,
    SESSION_KEY,
    ConfigStore,
)


def write_config(path, content):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# =============================================================================
# Location Tests
# =============================================================================


class TestConfigPath:
    """Tests for config file location."""

    def test_explicit_path(self, tmp_path):
        store = ConfigStore(tmp_path / "a.json")
        assert store.path == tmp_path / "a.json"

    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.json"))
        assert ConfigStore().path == tmp_path / "env.json"

    def test_default_under_home(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        path = ConfigStore.default_path()
        assert path.name == "config.json"
        assert path.parent.name == "byte-package-builder"


# =============================================================================
# Session Tests
# =============================================================================


class TestSession:
    """Tests for the last-session slot."""

    def test_missing_file_gives_empty_session(self, store):
        assert store.get_last_session() == []
        assert store.get_last_selected_preset() is None

    def test_save_and_load(self, store, sample_records):
        store.save_session(sample_records)
        assert store.get_last_session() == sample_records

    def test_save_creates_parent_directory(self, store, config_path, sample_records):
        store.save_session(sample_records)
        assert config_path.is_file()

    def test_file_layout(self, store, config_path, sample_records):
        store.save_session(sample_records, "alpha")
        data = json.loads(config_path.read_text(encoding="utf-8"))
        assert data[SESSION_KEY] == sample_records
        assert data[SELECTED_PRESET_KEY] == "alpha"

    def test_file_is_indented(self, store, config_path, sample_records):
        store.save_session(sample_records)
        assert '\n  "__last_session__"' in config_path.read_text(encoding="utf-8")

    def test_selected_preset_survives_save_without_one(self, store, sample_records):
        store.save_session(sample_records, "alpha")
        store.save_session([])
        assert store.get_last_selected_preset() == "alpha"
        assert store.get_last_session() == []

    def test_session_save_keeps_presets(self, store, sample_records):
        store.save_preset("alpha", sample_records)
        store.save_session([])
        assert store.get_preset_names() == ["alpha"]

    def test_unicode_descriptions_round_trip(self, store):
        records = [{"value": "01", "description": "Команда"}]
        store.save_session(records)
        assert store.get_last_session() == records


# =============================================================================
# Corrupt Document Tests
# =============================================================================


class TestCorruptConfig:
    """Storage problems must never raise."""

    def test_invalid_json_reads_as_empty(self, store, config_path):
        write_config(config_path, "{not json")
        assert store.get_last_session() == []
        assert store.get_preset_names() == []

    def test_non_object_top_level_reads_as_empty(self, store, config_path):
        write_config(config_path, "[1, 2, 3]")
        assert store.get_last_session() == []

    def test_malformed_entries_are_skipped(self, store, config_path):
        write_config(
            config_path,
            json.dumps({SESSION_KEY: [{"value": 5}, "junk", {"description": "d"}]}),
        )
        assert store.get_last_session() == [
            {"value": "5", "description": ""},
            {"value": "", "description": "d"},
        ]

    def test_non_string_selected_preset_is_ignored(self, store, config_path):
        write_config(config_path, json.dumps({SELECTED_PRESET_KEY: 3}))
        assert store.get_last_selected_preset() is None

    def test_save_over_corrupt_file_recovers(self, store, config_path, sample_records):
        write_config(config_path, "garbage")
        store.save_session(sample_records)
        assert store.get_last_session() == sample_records

    def test_unencodable_text_leaves_no_temp_file(self, store, config_path, sample_records, caplog):
        store.save_session(sample_records)
        store.save_session([{"value": "01", "description": "\ud800"}])
        assert "Failed to write config" in caplog.text
        assert list(config_path.parent.glob("*.tmp")) == []
        assert store.get_last_session() == sample_records

    def test_write_failure_is_logged_not_raised(self, tmp_path, sample_records, caplog):
        blocker = tmp_path / "blocker"
        blocker.write_text("file, not a directory", encoding="utf-8")
        store = ConfigStore(blocker / "config.json")
        store.save_session(sample_records)
        assert "Failed to write config" in caplog.text


# =============================================================================
# Preset Tests
# =============================================================================


class TestPresets:
    """Tests for named presets."""

    def test_names_are_sorted(self, store, sample_records):
        for name in ["beta", "alpha", "Gamma"]:
            store.save_preset(name, sample_records)
        assert store.get_preset_names() == ["Gamma", "alpha", "beta"]

    def test_load_preset(self, store, sample_records):
        store.save_preset("alpha", sample_records)
        assert store.load_preset("alpha") == sample_records

    def test_missing_preset_is_empty(self, store):
        assert store.load_preset("nope") == []

    def test_save_overwrites_same_name(self, store, sample_records):
        store.save_preset("alpha", sample_records)
        store.save_preset("alpha", sample_records[:1])
        assert store.load_preset("alpha") == sample_records[:1]
        assert store.get_preset_names() == ["alpha"]

    def test_delete_preset(self, store, sample_records):
        store.save_preset("alpha", sample_records)
        store.save_preset("beta", sample_records)
        store.delete_preset("alpha")
        assert store.get_preset_names() == ["beta"]

    def test_delete_missing_preset_is_noop(self, store, config_path):
        store.delete_preset("nope")
        assert not config_path.exists()

    def test_presets_stored_under_presets_key(self, store, config_path, sample_records):
        store.save_preset("alpha", sample_records)
        data = json.loads(config_path.read_text(encoding="utf-8"))
        assert data[PRESETS_KEY] == {"alpha": sample_records}

    def test_save_preset_accepts_generator(self, store, sample_records):
        store.save_preset("gen", (record for record in sample_records))
        assert store.load_preset("gen") == sample_records
