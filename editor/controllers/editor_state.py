"""
Byte Package Builder - Editor State

Manages UI-only state: which text field has focus, the cursor, scrolling
and the status message.
"""

from typing import Optional, Tuple

from editor.core.constants import STATUS_MESSAGE_MS

VALUE_COLUMN = "value"
DESCRIPTION_COLUMN = "description"
COLUMNS = (VALUE_COLUMN, DESCRIPTION_COLUMN)


class EditorState:
    """Manages editor UI state."""

    def __init__(self):
        # Focused text field: (row index, column name)
        self.active_field: Optional[Tuple[int, str]] = None
        self.cursor: int = 0

        # Row list scroll position in pixels
        self.scroll_offset: int = 0

        # Toast shown in the status bar
        self.status_message: Optional[str] = None
        self.status_expires_at: int = 0

    def focus(self, row: int, column: str, cursor: int = 0):
        """Give focus to a text field."""
        if column in COLUMNS:
            self.active_field = (row, column)
            self.cursor = max(0, cursor)

    def clear_focus(self):
        self.active_field = None
        self.cursor = 0

    def next_field(self, row_count: int, backwards: bool = False) -> Optional[Tuple[int, str]]:
        """
        Move focus to the next (or previous) text field, wrapping around.

        Returns:
            The newly focused field, or None if there are no rows
        """
        if row_count == 0:
            self.clear_focus()
            return None

        fields = [(row, column) for row in range(row_count) for column in COLUMNS]
        if self.active_field in fields:
            step = -1 if backwards else 1
            index = (fields.index(self.active_field) + step) % len(fields)
        else:
            index = len(fields) - 1 if backwards else 0

        self.active_field = fields[index]
        return self.active_field

    def on_row_removed(self, index: int):
        """Keep focus pointing at the same row after a row is deleted."""
        if self.active_field is None:
            return
        row, column = self.active_field
        if row == index:
            self.clear_focus()
        elif row > index:
            self.active_field = (row - 1, column)

    def scroll(self, delta: int, max_offset: int):
        """Scroll the row list, clamped to [0, max_offset]."""
        self.scroll_offset = max(0, min(self.scroll_offset + delta, max(0, max_offset)))

    def show_status(self, message: str, now_ms: int):
        self.status_message = message
        self.status_expires_at = now_ms + STATUS_MESSAGE_MS

    def current_status(self, now_ms: int) -> Optional[str]:
        """Status message if it has not expired yet."""
        if self.status_message is not None and now_ms < self.status_expires_at:
            return self.status_message
        return None
