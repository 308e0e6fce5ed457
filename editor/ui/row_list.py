"""
Byte Package Builder - Row List View

Lays out the package rows: the read-only start byte row, one editable row per
entry and the read-only checksum row. Used for both rendering and hit testing.
"""

from typing import Optional, Sequence, Tuple

import pygame
from pygame import Rect, Surface

from bytepack.core.export import CHECKSUM_LABEL, START_BYTE_LABEL
from bytepack.core.package import BytePackage, Row
from editor.controllers.editor_state import DESCRIPTION_COLUMN, VALUE_COLUMN, EditorState
from editor.core.constants import (
    COLOR_TEXT,
    DELETE_BUTTON_WIDTH,
    DESCRIPTION_COLUMN_WEIGHT,
    FIELD_SPACING,
    HEADER_HEIGHT,
    ROW_HEIGHT,
    ROW_SPACING,
    VALUE_COLUMN_WEIGHT,
)
from editor.ui.widgets import Button, TextField

DELETE = "delete"


class RowListView:
    """Geometry and drawing for the scrollable row list."""

    def __init__(self, rect: Rect):
        """
        Args:
            rect: Screen area for the header and rows
        """
        self.rect = rect

    @property
    def rows_rect(self) -> Rect:
        """Area below the column header where rows scroll."""
        return Rect(self.rect.x, self.rect.y + HEADER_HEIGHT, self.rect.width, self.rect.height - HEADER_HEIGHT)

    def _column_widths(self) -> Tuple[int, int]:
        available = self.rect.width - DELETE_BUTTON_WIDTH - 2 * FIELD_SPACING
        total_weight = VALUE_COLUMN_WEIGHT + DESCRIPTION_COLUMN_WEIGHT
        value_width = available * VALUE_COLUMN_WEIGHT // total_weight
        return value_width, available - value_width

    def line_y(self, line: int, scroll_offset: int) -> int:
        """Top of a list line. Line 0 is the start byte row."""
        return self.rows_rect.y + line * (ROW_HEIGHT + ROW_SPACING) - scroll_offset

    def line_rects(self, line: int, scroll_offset: int) -> Tuple[Rect, Rect, Rect]:
        """(value, description, delete button) rects for a list line."""
        value_width, description_width = self._column_widths()
        y = self.line_y(line, scroll_offset)
        value_rect = Rect(self.rect.x, y, value_width, ROW_HEIGHT)
        description_rect = Rect(value_rect.right + FIELD_SPACING, y, description_width, ROW_HEIGHT)
        delete_rect = Rect(description_rect.right + FIELD_SPACING, y, DELETE_BUTTON_WIDTH, ROW_HEIGHT)
        return value_rect, description_rect, delete_rect

    def content_height(self, row_count: int) -> int:
        # Start byte and checksum lines frame the editable rows
        lines = row_count + 2
        return lines * (ROW_HEIGHT + ROW_SPACING) - ROW_SPACING

    def max_scroll(self, row_count: int) -> int:
        return max(0, self.content_height(row_count) - self.rows_rect.height)

    def hit_test(
        self, pos: Tuple[int, int], row_count: int, scroll_offset: int
    ) -> Optional[Tuple[int, str]]:
        """
        Find what is under a screen position.

        Returns:
            (row index, VALUE_COLUMN | DESCRIPTION_COLUMN | DELETE) for an
            editable row, or None for read-only rows and empty space
        """
        if not self.rows_rect.collidepoint(pos):
            return None
        for row in range(row_count):
            value_rect, description_rect, delete_rect = self.line_rects(row + 1, scroll_offset)
            if value_rect.collidepoint(pos):
                return row, VALUE_COLUMN
            if description_rect.collidepoint(pos):
                return row, DESCRIPTION_COLUMN
            if delete_rect.collidepoint(pos):
                return row, DELETE
        return None

    def field_for(self, row: int, column: str, scroll_offset: int) -> TextField:
        value_rect, description_rect, _ = self.line_rects(row + 1, scroll_offset)
        return TextField(value_rect if column == VALUE_COLUMN else description_rect)

    def scroll_to_row(self, row: int, state: EditorState, row_count: int):
        """Adjust scrolling so an editable row is fully visible."""
        top = self.line_y(row + 1, 0) - self.rows_rect.y
        bottom = top + ROW_HEIGHT
        if top < state.scroll_offset:
            state.scroll_offset = top
        elif bottom > state.scroll_offset + self.rows_rect.height:
            state.scroll_offset = bottom - self.rows_rect.height
        state.scroll(0, self.max_scroll(row_count))

    def render(
        self,
        screen: Surface,
        font: pygame.font.Font,
        rows: Sequence[Row],
        package: BytePackage,
        state: EditorState,
        blink_on: bool = True,
    ):
        self._render_header(screen, font)

        previous_clip = screen.get_clip()
        screen.set_clip(self.rows_rect)

        self._render_fixed_line(screen, font, 0, f"{package.start_byte:02X}", START_BYTE_LABEL, state)
        for index, row in enumerate(rows):
            self._render_row(screen, font, index, row, state, blink_on)
        self._render_fixed_line(screen, font, len(rows) + 1, f"{package.checksum:02X}", CHECKSUM_LABEL, state)

        screen.set_clip(previous_clip)

    def _render_header(self, screen: Surface, font: pygame.font.Font):
        value_rect, description_rect, _ = self.line_rects(0, 0)
        y = self.rect.y + HEADER_HEIGHT // 2
        for label, rect in (("Value", value_rect), ("Description", description_rect)):
            surf = font.render(label, True, COLOR_TEXT)
            screen.blit(surf, surf.get_rect(left=rect.x + 8, centery=y))

    def _render_fixed_line(self, screen, font, line, value, description, state):
        value_rect, description_rect, _ = self.line_rects(line, state.scroll_offset)
        TextField(value_rect, read_only=True).render(screen, font, value)
        TextField(description_rect, read_only=True).render(screen, font, description)

    def _render_row(self, screen, font, index, row, state, blink_on):
        value_rect, description_rect, delete_rect = self.line_rects(index + 1, state.scroll_offset)
        delete_button = Button(delete_rect, "X", lambda: None)
        delete_button.hovered = delete_rect.collidepoint(pygame.mouse.get_pos())
        delete_button.render(screen, font)

        for column, rect, text in (
            (VALUE_COLUMN, value_rect, row.value),
            (DESCRIPTION_COLUMN, description_rect, row.description),
        ):
            active = state.active_field == (index, column)
            TextField(rect).render(
                screen,
                font,
                text,
                active=active,
                invalid=column == VALUE_COLUMN and row.is_invalid,
                cursor=state.cursor if active and blink_on else None,
            )
