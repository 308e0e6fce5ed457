"""
Byte Package Builder - Clipboard

Plain-text clipboard access through pygame.scrap.
"""

import pygame


class ClipboardError(Exception):
    """Clipboard is unavailable or rejected the operation."""


class Clipboard:
    """System clipboard for plain text. Needs an open pygame display."""

    def __init__(self):
        self._initialized = False

    def _ensure_init(self):
        if self._initialized:
            return
        if not pygame.display.get_init() or pygame.display.get_surface() is None:
            raise ClipboardError("Clipboard needs an open display")
        try:
            pygame.scrap.init()
        except pygame.error as e:
            raise ClipboardError(f"Clipboard unavailable: {e}") from e
        self._initialized = True

    def set_text(self, text: str):
        """Replace clipboard contents with text."""
        self._ensure_init()
        try:
            pygame.scrap.put_text(text)
        except pygame.error as e:
            raise ClipboardError(f"Failed to write clipboard: {e}") from e

    def get_text(self) -> str:
        """Current clipboard text, empty if there is none."""
        self._ensure_init()
        try:
            return pygame.scrap.get_text() or ""
        except pygame.error as e:
            raise ClipboardError(f"Failed to read clipboard: {e}") from e
