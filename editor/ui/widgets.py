"""
Byte Package Builder - UI Widgets

Basic UI widget components for the editor.
"""

from typing import Callable, List, Optional, Tuple

import pygame
from pygame import Rect, Surface

from editor.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_DISABLED,
    COLOR_BUTTON_HOVER,
    COLOR_FIELD,
    COLOR_FIELD_INVALID,
    COLOR_FIELD_READONLY,
    COLOR_GRID,
    COLOR_PANEL,
    COLOR_SELECTION,
    COLOR_TEXT,
    COLOR_TEXT_DARK,
    COLOR_TEXT_MUTED,
    FIELD_PADDING,
)


class Button:
    """Simple button widget."""

    def __init__(self, rect: Rect, text: str, callback: Callable[[], None]):
        self.rect = rect
        self.text = text
        self.callback = callback
        self.hovered = False
        self.enabled = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def render(self, screen: Surface, font: pygame.font.Font):
        if not self.enabled:
            color = COLOR_BUTTON_DISABLED
        else:
            color = COLOR_BUTTON_HOVER if self.hovered else COLOR_BUTTON
        pygame.draw.rect(screen, color, self.rect)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1)

        text_color = COLOR_TEXT if self.enabled else COLOR_TEXT_MUTED
        text_surf = font.render(self.text, True, text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)


def edit_text(
    text: str, cursor: int, event: pygame.event.Event, max_length: Optional[int] = None
) -> Optional[Tuple[str, int]]:
    """
    Apply a KEYDOWN event to a single-line text buffer.

    Args:
        text: Current text
        cursor: Cursor offset into text
        event: Pygame KEYDOWN event
        max_length: Optional length limit for typed characters

    Returns:
        (new_text, new_cursor), or None if the key is not an editing key
    """
    cursor = max(0, min(cursor, len(text)))

    if event.key == pygame.K_BACKSPACE:
        if cursor == 0:
            return text, cursor
        return text[:cursor - 1] + text[cursor:], cursor - 1
    if event.key == pygame.K_DELETE:
        return text[:cursor] + text[cursor + 1:], cursor
    if event.key == pygame.K_LEFT:
        return text, max(0, cursor - 1)
    if event.key == pygame.K_RIGHT:
        return text, min(len(text), cursor + 1)
    if event.key == pygame.K_HOME:
        return text, 0
    if event.key == pygame.K_END:
        return text, len(text)

    char = getattr(event, "unicode", "")
    if char and char.isprintable():
        if max_length is not None and len(text) >= max_length:
            return text, cursor
        return insert_text(text, cursor, char)
    return None


def insert_text(text: str, cursor: int, inserted: str) -> Tuple[str, int]:
    """Insert a string at the cursor, returning the new text and cursor."""
    return text[:cursor] + inserted + text[cursor:], cursor + len(inserted)


class TextField:
    """Single-line text box. Holds no text itself; the caller passes it in."""

    def __init__(self, rect: Rect, read_only: bool = False):
        self.rect = rect
        self.read_only = read_only

    def render(
        self,
        screen: Surface,
        font: pygame.font.Font,
        text: str,
        active: bool = False,
        invalid: bool = False,
        cursor: Optional[int] = None,
    ):
        """
        Render the field.

        Args:
            text: Text to display
            active: Draw focus border and cursor
            invalid: Draw with the invalid-value background
            cursor: Cursor offset, drawn when active
        """
        if self.read_only:
            background = COLOR_FIELD_READONLY
        elif invalid:
            background = COLOR_FIELD_INVALID
        else:
            background = COLOR_FIELD
        pygame.draw.rect(screen, background, self.rect)
        pygame.draw.rect(screen, COLOR_SELECTION if active else COLOR_GRID, self.rect, 2 if active else 1)

        # Clip so long descriptions don't spill into neighbouring fields
        previous_clip = screen.get_clip()
        screen.set_clip(self.rect.inflate(-4, -4).clip(previous_clip))

        text_x = self.rect.x + FIELD_PADDING
        text_surf = font.render(text, True, COLOR_TEXT_DARK)
        screen.blit(text_surf, text_surf.get_rect(left=text_x, centery=self.rect.centery))

        if active and cursor is not None:
            cursor_x = text_x + font.size(text[:cursor])[0]
            pygame.draw.line(
                screen,
                COLOR_TEXT_DARK,
                (cursor_x, self.rect.y + 6),
                (cursor_x, self.rect.bottom - 6),
                1,
            )

        screen.set_clip(previous_clip)

    def cursor_from_x(self, font: pygame.font.Font, text: str, x: int) -> int:
        """Cursor offset closest to a screen x coordinate."""
        local_x = x - self.rect.x - FIELD_PADDING
        for i in range(len(text) + 1):
            if font.size(text[:i])[0] >= local_x:
                return i
        return len(text)


class Dropdown:
    """Single-choice dropdown list that opens above its button."""

    def __init__(self, rect: Rect, placeholder: str = "Select..."):
        self.rect = rect
        self.placeholder = placeholder
        self.options: List[str] = []
        self.selected: Optional[str] = None
        self.open = False

    def option_rects(self) -> List[Rect]:
        return [
            Rect(self.rect.x, self.rect.y - (i + 1) * self.rect.height, self.rect.width, self.rect.height)
            for i in range(len(self.options))
        ]

    def handle_click(self, pos: Tuple[int, int]) -> Tuple[bool, Optional[str]]:
        """
        Handle a left click.

        Returns:
            (consumed, chosen_option). chosen_option is set only when the user
            picked an entry from the open list.
        """
        if self.open:
            for rect, option in zip(self.option_rects(), self.options):
                if rect.collidepoint(pos):
                    self.open = False
                    return True, option
            # Click outside closes the list
            self.open = False
            return self.rect.collidepoint(pos), None

        if self.rect.collidepoint(pos) and self.options:
            self.open = True
            return True, None
        return False, None

    def render(self, screen: Surface, font: pygame.font.Font):
        """Render the closed box. Call render_options last so the list draws on top."""
        pygame.draw.rect(screen, COLOR_BUTTON, self.rect)
        pygame.draw.rect(screen, COLOR_GRID, self.rect, 1)

        label = self.selected if self.selected is not None else self.placeholder
        color = COLOR_TEXT if self.selected is not None else COLOR_TEXT_MUTED
        text_surf = font.render(label, True, color)
        screen.blit(text_surf, text_surf.get_rect(left=self.rect.x + FIELD_PADDING, centery=self.rect.centery))

        arrow = font.render("v", True, COLOR_TEXT)
        screen.blit(arrow, arrow.get_rect(right=self.rect.right - FIELD_PADDING, centery=self.rect.centery))

    def render_options(self, screen: Surface, font: pygame.font.Font):
        if not self.open:
            return
        mouse_pos = pygame.mouse.get_pos()
        for rect, option in zip(self.option_rects(), self.options):
            hovered = rect.collidepoint(mouse_pos)
            pygame.draw.rect(screen, COLOR_BUTTON_HOVER if hovered else COLOR_PANEL, rect)
            pygame.draw.rect(screen, COLOR_GRID, rect, 1)
            text_surf = font.render(option, True, COLOR_TEXT)
            screen.blit(text_surf, text_surf.get_rect(left=rect.x + FIELD_PADDING, centery=rect.centery))
