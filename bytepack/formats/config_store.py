"""
Byte Package Builder - Config Store

Persists the last working session and named presets in one JSON document.

Document layout:
    {
      "__last_session__": [{"value": "0102", "description": "..."}],
      "last_selected_preset": "name",
      "presets": {"name": [{"value": "...", "description": "..."}]}
    }

Storage problems never propagate: an unreadable or corrupt document is
treated as empty and failed writes are logged.
"""

import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bytepack.core.package import RowRecord

logger = logging.getLogger(__name__)

SESSION_KEY = "__last_session__"
SELECTED_PRESET_KEY = "last_selected_preset"
PRESETS_KEY = "presets"

CONFIG_ENV_VAR = "BYTEPACK_CONFIG"


class ConfigStore:
    """Session and preset storage backed by a single JSON file."""

    def __init__(self, path: str | Path | None = None):
        """
        Initialize config store.

        Args:
            path: JSON file location (default: ConfigStore.default_path())
        """
        self.path = Path(path) if path is not None else self.default_path()
        # Serializes read-modify-write between the session worker and preset edits
        self._lock = threading.Lock()

    @staticmethod
    def default_path() -> Path:
        """Config file location, honoring the BYTEPACK_CONFIG override."""
        override = os.environ.get(CONFIG_ENV_VAR)
        if override:
            return Path(override)
        return Path.home() / ".config" / "byte-package-builder" / "config.json"

    # Session

    def get_last_session(self) -> List[RowRecord]:
        return _to_records(self._read().get(SESSION_KEY))

    def get_last_selected_preset(self) -> Optional[str]:
        name = self._read().get(SELECTED_PRESET_KEY)
        return name if isinstance(name, str) else None

    def save_session(self, records: Iterable[Mapping[str, str]], selected_preset: Optional[str] = None):
        """
        Store the working rows. The selected preset is only written when given,
        so an earlier selection survives saves made with nothing selected.
        """
        records = _to_records(list(records))
        with self._lock:
            config = self._read()
            config[SESSION_KEY] = records
            if selected_preset is not None:
                config[SELECTED_PRESET_KEY] = selected_preset
            self._write(config)

    # Presets

    def get_preset_names(self) -> List[str]:
        presets = self._read().get(PRESETS_KEY)
        return sorted(presets.keys()) if isinstance(presets, dict) else []

    def load_preset(self, name: str) -> List[RowRecord]:
        """Rows of a preset, or an empty list if it is missing or malformed."""
        presets = self._read().get(PRESETS_KEY)
        if not isinstance(presets, dict):
            return []
        return _to_records(presets.get(name))

    def save_preset(self, name: str, records: Iterable[Mapping[str, str]]):
        """Store rows under name, replacing any preset with the same name."""
        records = _to_records(list(records))
        with self._lock:
            config = self._read()
            presets = config.get(PRESETS_KEY)
            if not isinstance(presets, dict):
                presets = config[PRESETS_KEY] = {}
            presets[name] = records
            self._write(config)

    def delete_preset(self, name: str):
        with self._lock:
            config = self._read()
            presets = config.get(PRESETS_KEY)
            if isinstance(presets, dict) and name in presets:
                del presets[name]
                self._write(config)

    # File access

    def _read(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning("Failed to read config %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: top level is not an object", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, Any]):
        content = json.dumps(data, indent=2, ensure_ascii=False)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=self.path.name, suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(content)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except (OSError, ValueError) as e:
            logger.error("Failed to write config %s: %s", self.path, e)


def _to_records(items: Any) -> List[RowRecord]:
    """Coerce stored row data into string-only records, skipping junk entries."""
    if not isinstance(items, list):
        return []
    records = []
    for item in items:
        if not isinstance(item, Mapping):
            continue
        records.append(
            {
                "value": str(item.get("value", "") or ""),
                "description": str(item.get("description", "") or ""),
            }
        )
    return records
