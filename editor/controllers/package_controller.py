"""
Byte Package Builder - Package Controller

Connects the package assembler to the config store and the clipboard.
Every command that changes the rows persists the session afterwards.
"""

import logging
from typing import List, Optional, Protocol

from bytepack.core.export import encode_flat, encode_markdown
from bytepack.core.package import BytePackage, PackageAssembler, Row
from bytepack.formats.config_store import ConfigStore
from bytepack.formats.hex_utils import NormalizedValue

from .session_writer import SessionWriter

logger = logging.getLogger(__name__)

MSG_COPIED_FLAT = "Copied to clipboard!"
MSG_COPIED_MARKDOWN = "Markdown table copied!"
MSG_COPY_FAILED = "Copy failed"


class TextClipboard(Protocol):
    def set_text(self, text: str) -> None: ...


class PackageController:
    """Owns the working rows, the preset selection and their persistence."""

    def __init__(
        self,
        store: ConfigStore,
        clipboard: TextClipboard,
        writer: Optional[SessionWriter] = None,
    ):
        """
        Initialize package controller.

        Args:
            store: Session and preset storage
            clipboard: Destination for copy actions
            writer: Persistence queue (default: background SessionWriter)
        """
        self.store = store
        self.clipboard = clipboard
        self.writer = writer if writer is not None else SessionWriter()
        self.assembler = PackageAssembler()
        self.presets: List[str] = []
        self.selected_preset: Optional[str] = None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self.assembler.rows

    def current_package(self) -> BytePackage:
        return self.assembler.current_bytes()

    def load(self):
        """Restore the last session and the preset selection."""
        session = self.store.get_last_session()
        if session:
            self.assembler.replace_all_rows(session)

        self._refresh_presets()
        last_preset = self.store.get_last_selected_preset()
        if last_preset is not None and last_preset in self.presets:
            self.selected_preset = last_preset

    # Row commands

    def add_row(self):
        self.assembler.add_row()
        self.save_session()

    def delete_row(self, index: int):
        self.assembler.remove_row(index)
        self.save_session()

    def edit_value(self, index: int, raw_text: str) -> NormalizedValue:
        """Normalize and store a row value; returns what the field should show."""
        normalized = self.assembler.update_row_value(index, raw_text)
        self.save_session()
        return normalized

    def edit_description(self, index: int, text: str):
        self.assembler.update_row_description(index, text)
        self.save_session()

    # Presets

    def select_preset(self, name: Optional[str]):
        """Load a preset into the working rows. Empty presets are ignored."""
        if name is None:
            return
        records = self.store.load_preset(name)
        if not records:
            logger.info("Preset %r is empty or missing, not loading", name)
            return
        self.assembler.replace_all_rows(records)
        self.selected_preset = name
        self.save_session()

    def save_preset(self, name: Optional[str]) -> bool:
        """
        Save the working rows as a preset, overwriting a preset of the same name.

        Returns:
            True if saved, False if the name was blank
        """
        if not name or not name.strip():
            return False
        self.store.save_preset(name, self.assembler.to_records())
        self._refresh_presets()
        self.selected_preset = name
        self.save_session()
        return True

    def delete_selected_preset(self) -> bool:
        """Delete the selected preset. Returns False if nothing was selected."""
        if self.selected_preset is None:
            return False
        self.store.delete_preset(self.selected_preset)
        self._refresh_presets()
        return True

    def _refresh_presets(self):
        self.presets = self.store.get_preset_names()
        if self.selected_preset not in self.presets:
            self.selected_preset = None

    # Persistence

    def save_session(self):
        """Queue a session save with a snapshot of the current rows."""
        records = self.assembler.to_records()
        selected = self.selected_preset
        self.writer.submit(
            lambda: self.store.save_session(records, selected), "session"
        )

    def close(self):
        """Wait for pending saves and stop the persistence worker."""
        self.writer.shutdown()

    # Export

    def copy_flat(self) -> str:
        """Copy the flat hex string; returns the status message to show."""
        try:
            self.clipboard.set_text(encode_flat(self.current_package()))
        except Exception:
            logger.warning("Copying flat export failed", exc_info=True)
            return MSG_COPY_FAILED
        return MSG_COPIED_FLAT

    def copy_markdown(self) -> str:
        """Copy the Markdown table; returns the status message to show."""
        try:
            descriptions = [row.description for row in self.rows]
            text = encode_markdown(self.current_package(), descriptions)
            self.clipboard.set_text(text)
        except Exception:
            logger.warning("Copying Markdown export failed", exc_info=True)
            return MSG_COPY_FAILED
        return MSG_COPIED_MARKDOWN
