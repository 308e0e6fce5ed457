"""
Byte Package Builder - Editor Application

Main application class that orchestrates all editor components.
"""

import logging
from typing import List, Optional

import pygame
from pygame import Rect

from bytepack.formats.config_store import ConfigStore
from bytepack.formats.hex_utils import format_hex_bytes

from .clipboard import Clipboard
from .controllers.editor_state import EditorState
from .controllers.event_handler import EventHandler
from .controllers.package_controller import MSG_COPY_FAILED, PackageController
from .controllers.session_writer import SessionWriter
from .core.constants import *
from .ui.dialogs import ConfirmDialog, PresetNameDialog
from .ui.row_list import RowListView
from .ui.widgets import Button, Dropdown

logger = logging.getLogger(__name__)


class EditorApplication:
    """Main editor application."""

    def __init__(self, store: ConfigStore):
        pygame.init()

        self.screen_width = WINDOW_WIDTH
        self.screen_height = WINDOW_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.key.set_repeat(400, 35)

        self.font = pygame.font.SysFont("monospace", 16)
        self.font_small = pygame.font.SysFont("monospace", 13)

        # Create application state
        self.state = EditorState()
        self.clipboard = Clipboard()
        self.controller = PackageController(store, self.clipboard, SessionWriter())
        self.controller.load()
        logger.info("Using config %s (%d rows restored)", store.path, len(self.controller.rows))

        # Create UI elements
        self.buttons: List[Button] = []
        self.btn_delete_preset: Optional[Button] = None
        self.dropdown: Optional[Dropdown] = None
        self.row_list: Optional[RowListView] = None
        self.presets_label_pos = (0, 0)
        self._create_ui()

        # Create event handler
        self.event_handler = EventHandler(
            self.state,
            self.controller,
            self.row_list,
            self.buttons,
            self.dropdown,
            self.font,
            paste_source=self.clipboard.get_text,
            on_resize=self._on_resize,
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create UI elements for the current window size."""
        bottom_bars = PRESET_BAR_HEIGHT + ACTION_BAR_HEIGHT + STATUS_HEIGHT
        list_rect = Rect(
            MARGIN,
            MARGIN,
            self.screen_width - 2 * MARGIN,
            self.screen_height - 2 * MARGIN - bottom_bars,
        )
        if self.row_list is None:
            self.row_list = RowListView(list_rect)
        else:
            self.row_list.rect = list_rect

        # Preset bar: label, dropdown, Save, Delete
        bar_y = list_rect.bottom + 8
        control_height = PRESET_BAR_HEIGHT - 16
        label_width = 90
        button_width = 100
        self.presets_label_pos = (MARGIN, bar_y + control_height // 2)
        dropdown_rect = Rect(
            MARGIN + label_width,
            bar_y,
            list_rect.width - label_width - 2 * (button_width + FIELD_SPACING),
            control_height,
        )
        if self.dropdown is None:
            self.dropdown = Dropdown(dropdown_rect)
        else:
            self.dropdown.rect = dropdown_rect
            self.dropdown.open = False

        # Rebuild in place so the event handler keeps the same list object
        self.buttons.clear()
        x = dropdown_rect.right + FIELD_SPACING
        self.buttons.append(Button(Rect(x, bar_y, button_width, control_height), "Save", self._on_save_preset))
        x += button_width + FIELD_SPACING
        self.btn_delete_preset = Button(Rect(x, bar_y, button_width, control_height), "Delete", self._on_delete_preset)
        self.buttons.append(self.btn_delete_preset)

        # Action bar, centered
        action_y = bar_y + PRESET_BAR_HEIGHT
        actions = [
            ("Add row", 110, self._on_add_row),
            ("Copy", 110, self._on_copy_flat),
            ("Copy Markdown", 170, self._on_copy_markdown),
        ]
        total_width = sum(width for _, width, _ in actions) + FIELD_SPACING * 2 * (len(actions) - 1)
        x = (self.screen_width - total_width) // 2
        for text, width, callback in actions:
            self.buttons.append(Button(Rect(x, action_y, width, control_height), text, callback))
            x += width + FIELD_SPACING * 2

    def _sync_ui(self):
        """Reflect controller state in the widgets."""
        self.dropdown.options = list(self.controller.presets)
        self.dropdown.selected = self.controller.selected_preset
        self.btn_delete_preset.enabled = self.controller.selected_preset is not None

    def _on_add_row(self):
        self.event_handler.add_row()

    def _on_copy_flat(self):
        self.state.show_status(self.controller.copy_flat(), pygame.time.get_ticks())

    def _on_copy_markdown(self):
        self.state.show_status(self.controller.copy_markdown(), pygame.time.get_ticks())

    def _on_save_preset(self):
        """Ask for a name and save the current rows as a preset."""
        dialog = PresetNameDialog(
            self.screen_width,
            self.screen_height,
            self.font,
            initial_name=self.controller.selected_preset or "",
        )
        name = dialog.show(self.screen, self.clock)
        if name is not None and self.controller.save_preset(name):
            self.state.show_status(f"Preset '{name}' saved", pygame.time.get_ticks())

    def _on_delete_preset(self):
        """Delete the selected preset after confirmation."""
        name = self.controller.selected_preset
        if name is None:
            return
        dialog = ConfirmDialog(
            self.screen_width,
            self.screen_height,
            self.font,
            "Delete preset",
            f"Delete preset '{name}'?",
        )
        if dialog.show(self.screen, self.clock):
            self.controller.delete_selected_preset()

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self._create_ui()
        self.state.scroll(0, self.row_list.max_scroll(len(self.controller.rows)))

    def run(self):
        """Main loop."""
        try:
            while self.running:
                events = pygame.event.get()
                self.running = self.event_handler.handle_events(events)
                self._render()
                self.clock.tick(FPS)
        finally:
            self.controller.close()
            pygame.quit()

    def _render(self):
        """Render the editor."""
        self._sync_ui()
        self.screen.fill(COLOR_BG)

        blink_on = (pygame.time.get_ticks() // CURSOR_BLINK_MS) % 2 == 0
        self.row_list.render(
            self.screen,
            self.font,
            self.controller.rows,
            self.controller.current_package(),
            self.state,
            blink_on,
        )

        label = self.font.render("Presets:", True, COLOR_TEXT)
        self.screen.blit(label, label.get_rect(left=self.presets_label_pos[0], centery=self.presets_label_pos[1]))
        self.dropdown.render(self.screen, self.font)
        for button in self.buttons:
            button.render(self.screen, self.font)

        self._render_status()

        # Dropdown list draws over everything else
        self.dropdown.render_options(self.screen, self.font)

        pygame.display.flip()

    def _render_status(self):
        """Render status bar."""
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)

        message = self.state.current_status(pygame.time.get_ticks())
        text_color = COLOR_TEXT
        if message is not None:
            status_text = message
            if message == MSG_COPY_FAILED:
                text_color = COLOR_ERROR
        else:
            package = self.controller.current_package()
            invalid_rows = sum(1 for row in self.controller.rows if row.is_invalid)
            status_parts = [
                f"Rows: {len(self.controller.rows)}",
                f"Bytes: {len(package.framed)}",
                f"Checksum: {format_hex_bytes([package.checksum])}",
            ]
            if invalid_rows:
                status_parts.append(f"Incomplete rows: {invalid_rows}")
            status_text = "  |  ".join(status_parts)

        text_surf = self.font_small.render(status_text, True, text_color)
        self.screen.blit(text_surf, text_surf.get_rect(left=10, centery=status_rect.centery))
