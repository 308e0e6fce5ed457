"""
Byte Package Builder - CRC-8 Checksum

Bitwise MSB-first CRC-8 with no reflection and no final XOR.
The default polynomial 0x07 with initial value 0x00 is CRC-8/SMBUS.
"""

from typing import Iterable

CRC8_POLYNOMIAL = 0x07
CRC8_INITIAL = 0x00


def crc8(
    data: Iterable[int], polynomial: int = CRC8_POLYNOMIAL, initial: int = CRC8_INITIAL
) -> int:
    """
    Compute the CRC-8 of a byte sequence.

    Args:
        data: Byte values (0-255), bytes or any iterable of ints
        polynomial: Generator polynomial without the implicit x^8 term
        initial: Starting register value

    Returns:
        Checksum byte (0-255); 0x00 for empty input with the defaults
    """
    crc = initial & 0xFF
    for byte in data:
        crc ^= byte & 0xFF
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ polynomial) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
    return crc


class Crc8:
    """Stateless CRC-8 calculator bound to one polynomial."""

    def __init__(self, polynomial: int = CRC8_POLYNOMIAL, initial: int = CRC8_INITIAL):
        self.polynomial = polynomial
        self.initial = initial

    def compute(self, data: Iterable[int]) -> int:
        """Compute the checksum of data."""
        return crc8(data, self.polynomial, self.initial)
