"""
Unit tests for EditorState focus, scrolling and status handling.
"""

import pytest

from editor.controllers.editor_state import DESCRIPTION_COLUMN, VALUE_COLUMN, EditorState
from editor.core.constants import STATUS_MESSAGE_MS


@pytest.fixture
def state():
    return EditorState()


class TestFocus:
    """Tests for focus and field traversal."""

    def test_initially_unfocused(self, state):
        assert state.active_field is None

    def test_focus_sets_field_and_cursor(self, state):
        state.focus(1, DESCRIPTION_COLUMN, 3)
        assert state.active_field == (1, DESCRIPTION_COLUMN)
        assert state.cursor == 3

    def test_focus_ignores_unknown_column(self, state):
        state.focus(0, "delete")
        assert state.active_field is None

    def test_next_field_from_nothing_starts_at_first_value(self, state):
        assert state.next_field(2) == (0, VALUE_COLUMN)

    def test_next_field_goes_value_then_description(self, state):
        state.focus(0, VALUE_COLUMN)
        assert state.next_field(2) == (0, DESCRIPTION_COLUMN)
        assert state.next_field(2) == (1, VALUE_COLUMN)

    def test_next_field_wraps(self, state):
        state.focus(1, DESCRIPTION_COLUMN)
        assert state.next_field(2) == (0, VALUE_COLUMN)

    def test_backwards_wraps_to_last(self, state):
        state.focus(0, VALUE_COLUMN)
        assert state.next_field(2, backwards=True) == (1, DESCRIPTION_COLUMN)

    def test_no_rows_clears_focus(self, state):
        state.focus(0, VALUE_COLUMN)
        assert state.next_field(0) is None
        assert state.active_field is None

    def test_removing_focused_row_clears_focus(self, state):
        state.focus(1, VALUE_COLUMN)
        state.on_row_removed(1)
        assert state.active_field is None

    def test_removing_earlier_row_shifts_focus(self, state):
        state.focus(2, DESCRIPTION_COLUMN)
        state.on_row_removed(0)
        assert state.active_field == (1, DESCRIPTION_COLUMN)

    def test_removing_later_row_keeps_focus(self, state):
        state.focus(0, VALUE_COLUMN)
        state.on_row_removed(3)
        assert state.active_field == (0, VALUE_COLUMN)


class TestScrolling:
    """Tests for scroll clamping."""

    def test_scroll_clamps_to_max(self, state):
        state.scroll(500, 120)
        assert state.scroll_offset == 120

    def test_scroll_clamps_to_zero(self, state):
        state.scroll(-50, 120)
        assert state.scroll_offset == 0

    def test_negative_max_means_no_scroll(self, state):
        state.scroll(10, -5)
        assert state.scroll_offset == 0


class TestStatus:
    """Tests for the transient status message."""

    def test_message_visible_until_expiry(self, state):
        state.show_status("Copied to clipboard!", 1000)
        assert state.current_status(1000 + STATUS_MESSAGE_MS - 1) == "Copied to clipboard!"

    def test_message_expires(self, state):
        state.show_status("Copied to clipboard!", 1000)
        assert state.current_status(1000 + STATUS_MESSAGE_MS) is None

    def test_no_message(self, state):
        assert state.current_status(0) is None
