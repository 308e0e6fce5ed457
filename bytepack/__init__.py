"""
Byte Package Builder - Core Library

Hex value normalization, CRC-8 checksum, package assembly, export encoders
and session/preset storage. Has no UI dependencies.
"""

from .core.crc8 import Crc8, crc8
from .core.export import encode_flat, encode_markdown
from .core.package import START_BYTE, BytePackage, PackageAssembler, Row
from .formats.config_store import ConfigStore
from .formats.hex_utils import NormalizedValue, normalize_hex_value

__all__ = [
    "START_BYTE",
    "BytePackage",
    "ConfigStore",
    "Crc8",
    "NormalizedValue",
    "PackageAssembler",
    "Row",
    "crc8",
    "encode_flat",
    "encode_markdown",
    "normalize_hex_value",
]
