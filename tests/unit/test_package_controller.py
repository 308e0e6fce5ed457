"""
Unit tests for PackageController commands, presets and clipboard export.
"""

from unittest.mock import Mock

import pytest

from bytepack.core.export import encode_markdown
from editor.clipboard import ClipboardError
from editor.controllers.package_controller import (
    MSG_COPIED_FLAT,
    MSG_COPIED_MARKDOWN,
    MSG_COPY_FAILED,
    PackageController,
)


@pytest.fixture
def loaded_controller(controller, sample_records):
    """Controller holding the sample rows."""
    controller.assembler.replace_all_rows(sample_records)
    return controller


# =============================================================================
# Startup Tests
# =============================================================================


class TestLoad:
    """Tests for restoring state at startup."""

    def test_empty_store(self, controller):
        controller.load()
        assert controller.rows == ()
        assert controller.presets == []
        assert controller.selected_preset is None

    def test_restores_session(self, store, controller, sample_records):
        store.save_session(sample_records)
        controller.load()
        assert [row.value for row in controller.rows] == ["01", "0203"]

    def test_restores_existing_selected_preset(self, store, controller, sample_records):
        store.save_preset("alpha", sample_records)
        store.save_session([], "alpha")
        controller.load()
        assert controller.presets == ["alpha"]
        assert controller.selected_preset == "alpha"

    def test_ignores_selection_of_deleted_preset(self, store, controller):
        store.save_session([], "gone")
        controller.load()
        assert controller.selected_preset is None

    def test_stored_values_are_renormalized(self, store, controller):
        store.save_session([{"value": "0a b", "description": ""}])
        controller.load()
        assert controller.rows[0].value == "0AB"
        assert controller.rows[0].is_invalid


# =============================================================================
# Row Command Tests
# =============================================================================


class TestRowCommands:
    """Every row change is persisted."""

    def test_add_row_persists(self, store, controller):
        controller.add_row()
        assert store.get_last_session() == [{"value": "", "description": ""}]

    def test_delete_row_persists(self, store, loaded_controller):
        loaded_controller.delete_row(0)
        assert store.get_last_session() == [{"value": "0203", "description": "y"}]

    def test_delete_last_row_persists_empty_session(self, store, controller):
        controller.add_row()
        controller.delete_row(0)
        assert store.get_last_session() == []

    def test_edit_value_returns_normalized(self, store, loaded_controller):
        normalized = loaded_controller.edit_value(0, "ф1")
        assert normalized.text == "A1"
        assert store.get_last_session()[0]["value"] == "A1"

    def test_edit_description_persists(self, store, loaded_controller):
        loaded_controller.edit_description(1, "length")
        assert store.get_last_session()[1]["description"] == "length"

    def test_current_package_follows_edits(self, loaded_controller):
        loaded_controller.edit_value(0, "")
        assert loaded_controller.current_package().payload == b"\x02\x03"

    def test_save_session_uses_writer(self, store, clipboard):
        writer = Mock()
        controller = PackageController(store, clipboard, writer)
        controller.add_row()
        writer.submit.assert_called_once()

    def test_save_session_snapshots_rows(self, store, clipboard):
        """Jobs queued earlier keep the rows they were queued with."""
        writer = Mock()
        controller = PackageController(store, clipboard, writer)
        controller.add_row()
        controller.edit_value(0, "01")
        first_job = writer.submit.call_args_list[0].args[0]
        first_job()
        assert store.get_last_session() == [{"value": "", "description": ""}]


# =============================================================================
# Preset Tests
# =============================================================================


class TestPresets:
    """Tests for preset selection, saving and deletion."""

    def test_save_preset(self, store, loaded_controller, sample_records):
        assert loaded_controller.save_preset("alpha")
        assert store.load_preset("alpha") == sample_records
        assert loaded_controller.presets == ["alpha"]
        assert loaded_controller.selected_preset == "alpha"

    def test_save_preset_records_selection(self, store, loaded_controller):
        loaded_controller.save_preset("alpha")
        assert store.get_last_selected_preset() == "alpha"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_is_rejected(self, store, loaded_controller, name):
        assert not loaded_controller.save_preset(name)
        assert store.get_preset_names() == []

    def test_save_preset_overwrites(self, store, loaded_controller):
        loaded_controller.save_preset("alpha")
        loaded_controller.delete_row(1)
        loaded_controller.save_preset("alpha")
        assert store.load_preset("alpha") == [{"value": "01", "description": "x"}]

    def test_select_preset_replaces_rows(self, store, controller, sample_records):
        store.save_preset("alpha", sample_records)
        controller.add_row()
        controller.select_preset("alpha")
        assert [row.value for row in controller.rows] == ["01", "0203"]
        assert controller.selected_preset == "alpha"
        assert store.get_last_session() == sample_records

    def test_select_empty_preset_is_ignored(self, store, loaded_controller):
        store.save_preset("empty", [])
        loaded_controller.select_preset("empty")
        assert len(loaded_controller.rows) == 2
        assert loaded_controller.selected_preset is None

    def test_select_none_is_ignored(self, loaded_controller):
        loaded_controller.select_preset(None)
        assert len(loaded_controller.rows) == 2

    def test_delete_selected_preset(self, store, loaded_controller):
        loaded_controller.save_preset("alpha")
        loaded_controller.save_preset("beta")
        assert loaded_controller.delete_selected_preset()
        assert store.get_preset_names() == ["alpha"]
        assert loaded_controller.presets == ["alpha"]
        assert loaded_controller.selected_preset is None

    def test_delete_without_selection(self, loaded_controller):
        assert not loaded_controller.delete_selected_preset()

    def test_delete_keeps_working_rows(self, loaded_controller):
        loaded_controller.save_preset("alpha")
        loaded_controller.delete_selected_preset()
        assert len(loaded_controller.rows) == 2


# =============================================================================
# Clipboard Export Tests
# =============================================================================


class TestCopy:
    """Tests for clipboard export actions."""

    def test_copy_flat(self, loaded_controller, clipboard):
        assert loaded_controller.copy_flat() == MSG_COPIED_FLAT
        clipboard.set_text.assert_called_once_with("AA01020348")

    def test_copy_markdown(self, loaded_controller, clipboard):
        assert loaded_controller.copy_markdown() == MSG_COPIED_MARKDOWN
        expected = encode_markdown(loaded_controller.current_package(), ["x", "y"])
        clipboard.set_text.assert_called_once_with(expected)

    def test_copy_failure_reports_status(self, loaded_controller, clipboard):
        clipboard.set_text.side_effect = ClipboardError("no display")
        assert loaded_controller.copy_flat() == MSG_COPY_FAILED
        assert loaded_controller.copy_markdown() == MSG_COPY_FAILED

    def test_copy_does_not_change_rows(self, loaded_controller):
        before = loaded_controller.rows
        loaded_controller.copy_flat()
        assert loaded_controller.rows == before
