"""
Architecture Table Line Parser

Decodes one line of the architecture table into a name and a bitset of
characteristic flags. A line looks like:

    mips             |     Q   CB   qr p    ia  s

The name comes first, then the literal separator "| ", then one character per
characteristic column. Flag columns are decoded by position only: a blank or
"?" means the bit is unset, any other glyph means it is set.
"""

import re
import logging
from dataclasses import dataclass
from typing import Iterator, Union

from gccarch.arch.characteristics import NUM_FIELDS, Characteristic
from gccarch.arch.errors import ParseError


logger = logging.getLogger("gccarch.arch.parser")

SEPARATOR = "| "
UNSET_MARKERS = frozenset(" ?")

# Whitespace around the name is space, tab, CR or LF; names are ASCII alphanumerics.
_NAME_RE = re.compile(r"[ \t\r\n]*([0-9A-Za-z]*)[ \t\r\n]*")


@dataclass(frozen=True)
class ArchitectureRecord:
    """One row of the architecture table"""
    name: str
    flags: int  # bit i set => characteristic i present

    def has_characteristic(self, characteristic: Union[Characteristic, int]) -> bool:
        """Check a single column, by characteristic or by index"""
        index = characteristic.index if isinstance(characteristic, Characteristic) else characteristic
        return bool(self.flags >> index & 1)

    def set_indices(self) -> Iterator[int]:
        """Yield the indices of all set bits in ascending order"""
        flags = self.flags
        index = 0
        while flags:
            if flags & 1:
                yield index
            flags >>= 1
            index += 1


def decode_flags(field: str) -> int:
    """Turn a run of flag glyphs into a bitset, one bit per character"""
    flags = 0
    for index, glyph in enumerate(field):
        if glyph not in UNSET_MARKERS:
            flags |= 1 << index
    return flags


def parse_line(line: str, num_fields: int = NUM_FIELDS) -> ArchitectureRecord:
    """
    Parse a single table line into an ArchitectureRecord.

    Args:
        line: One line of the table, without its line terminator
        num_fields: Number of flag columns to consume

    Returns:
        The decoded record

    Raises:
        ParseError: if the name is empty, the separator is missing, or fewer
            than num_fields flag characters follow the separator
    """
    match = _NAME_RE.match(line)
    name = match.group(1)
    if not name:
        raise ParseError(line, "missing architecture name")

    rest = line[match.end():]
    if not rest.startswith(SEPARATOR):
        raise ParseError(line, f"expected {SEPARATOR!r} after architecture name {name!r}")

    field = rest[len(SEPARATOR):]
    if len(field) < num_fields:
        raise ParseError(
            line, f"expected {num_fields} flag columns, found {len(field)}"
        )

    # Anything past the last column is not part of the record.
    flags = decode_flags(field[:num_fields])
    return ArchitectureRecord(name=name, flags=flags)
