"""
Byte Package Builder - Hex Value Utilities

Cleans user-typed text into hex digit strings and converts between hex text
and byte values. Shared by the package assembler, the exporters and the editor.
"""

import re
from typing import Iterable, List, NamedTuple, Tuple

# Cyrillic letters that share a key with A-F on a Russian keyboard layout
CYRILLIC_LOOKALIKES = "фисвуаФИСВУА"
LATIN_HEX_LETTERS = "ABCDEFABCDEF"

_LOOKALIKE_TABLE = str.maketrans(CYRILLIC_LOOKALIKES, LATIN_HEX_LETTERS)
_NON_HEX = re.compile(r"[^0-9A-Fa-f]")


class NormalizedValue(NamedTuple):
    """Result of cleaning a raw value string."""

    text: str
    is_invalid: bool


def normalize_hex_value(raw_text: str) -> NormalizedValue:
    """
    Clean arbitrary text into an uppercase hex digit string.

    Look-alike Cyrillic letters are substituted first, then every character
    that is not a hex digit is dropped. A result with an odd number of digits
    is flagged invalid but still returned.

    Args:
        raw_text: Text as typed or pasted by the user

    Returns:
        NormalizedValue with the cleaned text and the invalid flag

    Example:
        >>> normalize_hex_value("фF")
        NormalizedValue(text='AF', is_invalid=False)
        >>> normalize_hex_value("ab c")
        NormalizedValue(text='ABC', is_invalid=True)
    """
    converted = raw_text.translate(_LOOKALIKE_TABLE)
    text = _NON_HEX.sub("", converted).upper()
    return NormalizedValue(text, len(text) % 2 != 0)


def clamp_selection(start: int, end: int, length: int) -> Tuple[int, int]:
    """Clamp cursor/selection offsets into [0, length]."""
    return max(0, min(start, length)), max(0, min(end, length))


def split_hex_pairs(value: str) -> List[int]:
    """
    Parse consecutive two-digit pairs of a hex string.

    A trailing single digit is skipped, so "ABC" yields only 0xAB.

    Example:
        >>> split_hex_pairs("0102F")
        [1, 2]
    """
    return [int(value[i:i + 2], 16) for i in range(0, len(value) - 1, 2)]


def format_hex_bytes(data: Iterable[int], separator: str = "") -> str:
    """
    Format byte values as uppercase two-digit hex.

    Example:
        >>> format_hex_bytes([0xAA, 1, 0x0C])
        'AA010C'
        >>> format_hex_bytes([0xAA, 1], " ")
        'AA 01'
    """
    return separator.join(f"{b:02X}" for b in data)
