"""
Byte Package Builder - Package Assembler

Owns the ordered row list and derives the framed byte package from it:
start byte, payload bytes taken from the rows, and a CRC-8 checksum byte.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Tuple

from bytepack.core.crc8 import crc8
from bytepack.formats.hex_utils import NormalizedValue, normalize_hex_value, split_hex_pairs

START_BYTE = 0xAA

# {"value": "0102", "description": "..."} as stored in sessions and presets
RowRecord = Dict[str, str]


@dataclass(frozen=True)
class Row:
    """One editable entry: hex digits plus a free-text description."""

    value: str = ""
    description: str = ""
    is_invalid: bool = False

    @classmethod
    def from_value(cls, raw_value: str, description: str = "") -> "Row":
        """Build a row from untrusted text, normalizing the value."""
        normalized = normalize_hex_value(raw_value)
        return cls(normalized.text, description, normalized.is_invalid)

    @property
    def data(self) -> bytes:
        """Complete bytes of this row; a trailing odd digit is not included."""
        return bytes(split_hex_pairs(self.value))

    def to_record(self) -> RowRecord:
        return {"value": self.value, "description": self.description}


@dataclass(frozen=True)
class BytePackage:
    """Derived view of the package: start byte, per-row bytes and checksum."""

    row_bytes: Tuple[bytes, ...] = ()
    start_byte: int = START_BYTE
    payload: bytes = field(init=False)
    checksum: int = field(init=False)

    def __post_init__(self):
        payload = b"".join(self.row_bytes)
        object.__setattr__(self, "payload", payload)
        object.__setattr__(self, "checksum", crc8(payload))

    @property
    def framed(self) -> bytes:
        """Start byte, payload and checksum as sent on the wire."""
        return bytes([self.start_byte]) + self.payload + bytes([self.checksum])


class PackageAssembler:
    """Maintains the row sequence and recomputes the checksum on every change."""

    def __init__(self, rows: Iterable[Row] = ()):
        self._rows: List[Row] = list(rows)
        self._package = BytePackage()
        self._recompute()

    @property
    def rows(self) -> Tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def checksum(self) -> int:
        return self._package.checksum

    def __len__(self) -> int:
        return len(self._rows)

    def add_row(self) -> Row:
        """Append an empty row and return it."""
        row = Row()
        self._rows.append(row)
        self._recompute()
        return row

    def remove_row(self, index: int) -> Row:
        """
        Remove the row at index.

        Raises:
            IndexError: If index is outside the row list
        """
        self._check_index(index)
        row = self._rows.pop(index)
        self._recompute()
        return row

    def update_row_value(self, index: int, raw_text: str) -> NormalizedValue:
        """
        Normalize raw_text and store it as the value of the row at index.

        Returns:
            The normalized value, so the caller can update its display
        """
        self._check_index(index)
        normalized = normalize_hex_value(raw_text)
        old = self._rows[index]
        self._rows[index] = Row(normalized.text, old.description, normalized.is_invalid)
        self._recompute()
        return normalized

    def update_row_description(self, index: int, text: str):
        """Store text verbatim as the description of the row at index."""
        self._check_index(index)
        old = self._rows[index]
        self._rows[index] = Row(old.value, text, old.is_invalid)

    def replace_all_rows(self, records: Iterable[Mapping[str, str]]):
        """
        Replace the whole row list from stored records.

        Stored values are passed through the normalizer again; missing keys
        default to empty strings.
        """
        self._rows = [
            Row.from_value(record.get("value", ""), record.get("description", ""))
            for record in records
        ]
        self._recompute()

    def current_bytes(self) -> BytePackage:
        """Return the package derived from the current rows."""
        return self._package

    def to_records(self) -> List[RowRecord]:
        return [row.to_record() for row in self._rows]

    def _check_index(self, index: int):
        if not 0 <= index < len(self._rows):
            raise IndexError(f"Row index {index} out of range (0-{len(self._rows) - 1})")

    def _recompute(self):
        self._package = BytePackage(tuple(row.data for row in self._rows))
