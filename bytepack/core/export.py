"""
Byte Package Builder - Package Export

Serializes an assembled package for the clipboard, either as one flat hex
string or as a Markdown table that groups bytes by their description.

Markdown layout for start byte AA, two bytes described "len" and checksum 0E:

    |  |00|01|02| Description                            |
    |--|--|--|--|----------------------------------------|
    |AA|  |  |  | Start byte                             |
    |  |00|02|  | len                                    |
    |  |  |  |0E| Checksum                               |

The start byte sits in the unlabeled first column; the index cells number
the bytes that follow it.
"""

from typing import List, Sequence, Tuple

from bytepack.core.package import BytePackage
from bytepack.formats.hex_utils import format_hex_bytes

START_BYTE_LABEL = "Start byte"
CHECKSUM_LABEL = "Checksum"
DESCRIPTION_HEADER = "Description"

# Table cell widths in characters
BYTE_CELL_WIDTH = 2
DESCRIPTION_CELL_WIDTH = 40

EMPTY_DESCRIPTION = " "


def encode_flat(package: BytePackage) -> str:
    """Start byte, payload and checksum as one uppercase hex string."""
    return format_hex_bytes(package.framed)


def describe_bytes(
    package: BytePackage, descriptions: Sequence[str]
) -> List[Tuple[str, str]]:
    """
    Pair every byte of the framed package with its description.

    Args:
        package: Assembled package
        descriptions: One description per row, in row order

    Returns:
        List of (hex_byte, description) tuples, start byte first and
        checksum last. Rows with an empty description get a single space.
    """
    if len(descriptions) != len(package.row_bytes):
        raise ValueError(
            f"Expected {len(package.row_bytes)} descriptions, got {len(descriptions)}"
        )

    pairs = [(f"{package.start_byte:02X}", START_BYTE_LABEL)]
    for data, description in zip(package.row_bytes, descriptions):
        label = description or EMPTY_DESCRIPTION
        pairs.extend((f"{b:02X}", label) for b in data)
    pairs.append((f"{package.checksum:02X}", CHECKSUM_LABEL))
    return pairs


def group_byte_runs(pairs: Sequence[Tuple[str, str]]) -> List[Tuple[str, List[str]]]:
    """
    Group consecutive pairs that share an identical description.

    Descriptions are compared exactly, so "id" and "id " start separate runs.

    Returns:
        List of (description, [hex_byte, ...]) in input order
    """
    groups: List[Tuple[str, List[str]]] = []
    for hex_byte, description in pairs:
        if groups and groups[-1][0] == description:
            groups[-1][1].append(hex_byte)
        else:
            groups.append((description, [hex_byte]))
    return groups


def encode_markdown(package: BytePackage, descriptions: Sequence[str]) -> str:
    """
    Render the package as a Markdown table, one line per description run.

    Args:
        package: Assembled package
        descriptions: One description per row, in row order

    Returns:
        Newline-joined table text
    """
    pairs = describe_bytes(package, descriptions)
    total = len(pairs)
    blank = " " * BYTE_CELL_WIDTH

    header = (
        ["|" + blank]
        + [str(i).zfill(BYTE_CELL_WIDTH) for i in range(total - 1)]
        + [_description_cell(DESCRIPTION_HEADER) + "|"]
    )
    separator = (
        ["|" + "-" * BYTE_CELL_WIDTH]
        + ["-" * BYTE_CELL_WIDTH] * (total - 1)
        + ["-" * DESCRIPTION_CELL_WIDTH + "|"]
    )
    lines = ["|".join(header), "|".join(separator)]

    position = 0
    for description, hex_bytes in group_byte_runs(pairs):
        cells = [blank] * total + [_description_cell(description)]
        cells[position:position + len(hex_bytes)] = hex_bytes
        lines.append("|" + "|".join(cells) + "|")
        position += len(hex_bytes)

    return "\n".join(lines)


def _description_cell(text: str) -> str:
    return " " + text.ljust(DESCRIPTION_CELL_WIDTH - 1)
