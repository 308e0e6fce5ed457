"""
Byte Package Builder - Dialogs

Modal dialogs for naming a preset and confirming a deletion.
Each dialog runs its own event loop in show() until closed.
"""

import pygame
from pygame import Rect, Surface

from editor.core.constants import (
    COLOR_BUTTON,
    COLOR_BUTTON_HOVER,
    COLOR_GRID,
    COLOR_PANEL,
    COLOR_TEXT,
    FPS,
)
from editor.ui.widgets import TextField, edit_text

MAX_PRESET_NAME_LENGTH = 50


class _ModalDialog:
    """Shared frame, overlay and button drawing for modal dialogs."""

    dialog_width = 400
    dialog_height = 180

    def __init__(self, screen_width: int, screen_height: int, title: str, font: pygame.font.Font):
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.title = title
        self.font = font
        self.cancelled = False

        self.dialog_rect = Rect(
            (screen_width - self.dialog_width) // 2,
            (screen_height - self.dialog_height) // 2,
            self.dialog_width,
            self.dialog_height,
        )

        margin = 20
        button_width = 100
        button_height = 36
        button_y = self.dialog_rect.bottom - margin - button_height
        # Cancel on the left, confirm on the right
        self.cancel_button_rect = Rect(
            self.dialog_rect.centerx - button_width - 10, button_y, button_width, button_height
        )
        self.ok_button_rect = Rect(
            self.dialog_rect.centerx + 10, button_y, button_width, button_height
        )
        self.title_y = self.dialog_rect.y + margin

    def _render_frame(self, screen: Surface):
        overlay = Surface((self.screen_width, self.screen_height))
        overlay.set_alpha(200)
        overlay.fill((0, 0, 0))
        screen.blit(overlay, (0, 0))

        pygame.draw.rect(screen, COLOR_PANEL, self.dialog_rect)
        pygame.draw.rect(screen, COLOR_GRID, self.dialog_rect, 2)

        title_surf = self.font.render(self.title, True, COLOR_TEXT)
        screen.blit(title_surf, title_surf.get_rect(centerx=self.dialog_rect.centerx, y=self.title_y))

    def _render_button(self, screen: Surface, rect: Rect, text: str):
        is_hovered = rect.collidepoint(pygame.mouse.get_pos())
        pygame.draw.rect(screen, COLOR_BUTTON_HOVER if is_hovered else COLOR_BUTTON, rect)
        pygame.draw.rect(screen, COLOR_GRID, rect, 1)

        text_surf = self.font.render(text, True, COLOR_TEXT)
        screen.blit(text_surf, text_surf.get_rect(center=rect.center))

    def handle_event(self, event: pygame.event.Event) -> bool:
        raise NotImplementedError

    def render(self, screen: Surface):
        raise NotImplementedError

    def _run(self, screen: Surface, clock: pygame.time.Clock):
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.cancelled = True
                    running = False
                elif self.handle_event(event):
                    running = False

            self.render(screen)
            pygame.display.flip()
            clock.tick(FPS)


class PresetNameDialog(_ModalDialog):
    """Asks for the name to save the current rows under."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: pygame.font.Font,
        title: str = "Save preset",
        label: str = "Preset name:",
        initial_name: str = "",
    ):
        super().__init__(screen_width, screen_height, title, font)
        self.label = label
        self.name = initial_name
        self.cursor = len(initial_name)

        self.label_y = self.title_y + 36
        self.name_field = TextField(
            Rect(self.dialog_rect.x + 20, self.label_y + 24, self.dialog_width - 40, 32)
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events. Returns True if dialog should close."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ok_button_rect.collidepoint(event.pos):
                return True
            if self.cancel_button_rect.collidepoint(event.pos):
                self.cancelled = True
                return True
            if self.name_field.rect.collidepoint(event.pos):
                self.cursor = self.name_field.cursor_from_x(self.font, self.name, event.pos[0])

        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.cancelled = True
                return True
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                return True
            edited = edit_text(self.name, self.cursor, event, MAX_PRESET_NAME_LENGTH)
            if edited is not None:
                self.name, self.cursor = edited

        return False

    def render(self, screen: Surface):
        self._render_frame(screen)

        label_surf = self.font.render(self.label, True, COLOR_TEXT)
        screen.blit(label_surf, (self.name_field.rect.x, self.label_y))
        self.name_field.render(screen, self.font, self.name, active=True, cursor=self.cursor)

        self._render_button(screen, self.cancel_button_rect, "Cancel")
        self._render_button(screen, self.ok_button_rect, "OK")

    def show(self, screen: Surface, clock: pygame.time.Clock) -> str | None:
        """
        Show dialog and run event loop until user confirms or cancels.

        Returns:
            Entered name (possibly empty) if confirmed, None if cancelled
        """
        self._run(screen, clock)
        return None if self.cancelled else self.name


class ConfirmDialog(_ModalDialog):
    """Yes/No question."""

    def __init__(self, screen_width: int, screen_height: int, font: pygame.font.Font, title: str, message: str):
        super().__init__(screen_width, screen_height, title, font)
        self.message = message

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events. Returns True if dialog should close."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ok_button_rect.collidepoint(event.pos):
                return True
            if self.cancel_button_rect.collidepoint(event.pos):
                self.cancelled = True
                return True

        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_n):
                self.cancelled = True
                return True
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_y):
                return True

        return False

    def render(self, screen: Surface):
        self._render_frame(screen)

        message_surf = self.font.render(self.message, True, COLOR_TEXT)
        screen.blit(
            message_surf,
            message_surf.get_rect(centerx=self.dialog_rect.centerx, y=self.title_y + 50),
        )

        self._render_button(screen, self.cancel_button_rect, "No")
        self._render_button(screen, self.ok_button_rect, "Yes")

    def show(self, screen: Surface, clock: pygame.time.Clock) -> bool:
        """Returns True if the user answered yes."""
        self._run(screen, clock)
        return not self.cancelled
