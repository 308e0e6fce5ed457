"""
Byte Package Builder - Event Handler

Handles user input events including mouse, keyboard, and window events,
and turns them into package controller commands.
"""

import logging
from typing import Callable, List

import pygame

from bytepack.formats.hex_utils import clamp_selection, normalize_hex_value
from editor.clipboard import ClipboardError
from editor.core.constants import MAX_DESCRIPTION_LENGTH, SCROLL_STEP
from editor.ui.row_list import DELETE, RowListView
from editor.ui.widgets import Button, Dropdown, edit_text, insert_text

from .editor_state import VALUE_COLUMN, EditorState
from .package_controller import PackageController

logger = logging.getLogger(__name__)


class EventHandler:
    """Handles all user input events."""

    def __init__(
        self,
        state: EditorState,
        controller: PackageController,
        row_list: RowListView,
        buttons: List[Button],
        dropdown: Dropdown,
        font: pygame.font.Font,
        paste_source: Callable[[], str],
        on_resize: Callable[[int, int], None],
    ):
        """
        Initialize event handler.

        Args:
            state: Editor UI state
            controller: Package controller receiving row and preset commands
            row_list: Row list view used for hit testing
            buttons: Toolbar buttons
            dropdown: Preset dropdown
            font: Font the fields are rendered with (for click-to-cursor)
            paste_source: Returns clipboard text for Ctrl+V
            on_resize: Callback for window resize (width, height)
        """
        self.state = state
        self.controller = controller
        self.row_list = row_list
        self.buttons = buttons
        self.dropdown = dropdown
        self.font = font
        self.paste_source = paste_source
        self.on_resize = on_resize

    def handle_events(self, events: List[pygame.event.Event]) -> bool:
        """
        Handle all pygame events.

        Args:
            events: List of pygame events to process

        Returns:
            True if application should continue running, False if quit requested
        """
        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.KEYDOWN:
                self._handle_key(event)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event)

            elif event.type == pygame.MOUSEMOTION:
                for button in self.buttons:
                    button.handle_event(event)

            elif event.type == pygame.MOUSEWHEEL:
                max_offset = self.row_list.max_scroll(len(self.controller.rows))
                self.state.scroll(-event.y * SCROLL_STEP, max_offset)

            elif event.type == pygame.VIDEORESIZE:
                self.on_resize(event.w, event.h)

        return True

    def _handle_click(self, event: pygame.event.Event):
        # Open dropdown list overlaps everything else
        consumed, chosen = self.dropdown.handle_click(event.pos)
        if chosen is not None:
            self.state.clear_focus()
            self.controller.select_preset(chosen)
            self.state.scroll(0, self.row_list.max_scroll(len(self.controller.rows)))
        if consumed:
            return

        for button in self.buttons:
            if button.handle_event(event):
                return

        hit = self.row_list.hit_test(event.pos, len(self.controller.rows), self.state.scroll_offset)
        if hit is None:
            self.state.clear_focus()
            return

        row, column = hit
        if column == DELETE:
            self.delete_row(row)
            return

        text = self._field_text(row, column)
        field = self.row_list.field_for(row, column, self.state.scroll_offset)
        self.state.focus(row, column, field.cursor_from_x(self.font, text, event.pos[0]))

    def _handle_key(self, event: pygame.event.Event):
        ctrl = bool(event.mod & pygame.KMOD_CTRL)

        if ctrl and event.key == pygame.K_n:
            self.add_row()
            return

        if self.state.active_field is None:
            return

        if event.key == pygame.K_TAB:
            self._focus_next(backwards=bool(event.mod & pygame.KMOD_SHIFT))
        elif event.key == pygame.K_ESCAPE:
            self.state.clear_focus()
        elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._focus_next()
        elif ctrl and event.key == pygame.K_v:
            self._paste()
        elif not ctrl:
            row, column = self.state.active_field
            max_length = None if column == VALUE_COLUMN else MAX_DESCRIPTION_LENGTH
            edited = edit_text(self._field_text(row, column), self.state.cursor, event, max_length)
            if edited is not None:
                self.apply_text(*edited)

    def apply_text(self, text: str, cursor: int):
        """
        Store edited text in the active field.

        Values are normalized; the cursor keeps its place relative to the
        surviving hex digits and is clamped into the cleaned text.
        """
        if self.state.active_field is None:
            return
        row, column = self.state.active_field

        if column == VALUE_COLUMN:
            normalized = self.controller.edit_value(row, text)
            if normalized.text != text:
                cursor = len(normalize_hex_value(text[:cursor]).text)
            cursor, _ = clamp_selection(cursor, cursor, len(normalized.text))
        else:
            self.controller.edit_description(row, text)

        self.state.cursor = cursor

    def add_row(self):
        """Append a row and focus its value field."""
        self.controller.add_row()
        row = len(self.controller.rows) - 1
        self.state.focus(row, VALUE_COLUMN)
        self.row_list.scroll_to_row(row, self.state, len(self.controller.rows))

    def delete_row(self, index: int):
        self.controller.delete_row(index)
        self.state.on_row_removed(index)
        self.state.scroll(0, self.row_list.max_scroll(len(self.controller.rows)))

    def _paste(self):
        try:
            pasted = self.paste_source()
        except ClipboardError as e:
            logger.warning("Paste failed: %s", e)
            return
        # Single-line fields
        pasted = pasted.replace("\r", " ").replace("\n", " ")
        row, column = self.state.active_field
        text, cursor = insert_text(self._field_text(row, column), self.state.cursor, pasted)
        if column != VALUE_COLUMN:
            text = text[:MAX_DESCRIPTION_LENGTH]
            cursor = min(cursor, len(text))
        self.apply_text(text, cursor)

    def _focus_next(self, backwards: bool = False):
        row_count = len(self.controller.rows)
        field = self.state.next_field(row_count, backwards)
        if field is None:
            return
        row, column = field
        self.state.cursor = len(self._field_text(row, column))
        self.row_list.scroll_to_row(row, self.state, row_count)

    def _field_text(self, row: int, column: str) -> str:
        data = self.controller.rows[row]
        return data.value if column == VALUE_COLUMN else data.description
