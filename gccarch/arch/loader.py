"""
Architecture Table Loader

Reads the architecture table shipped with the package (or an alternate copy)
and turns it into an ordered tuple of records. The whole load fails on the
first malformed line.
"""

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from gccarch.arch.characteristics import NUM_FIELDS
from gccarch.arch.errors import ParseError
from gccarch.arch.parser import ArchitectureRecord, parse_line


logger = logging.getLogger("gccarch.arch.loader")

TABLE_FILE = Path(__file__).resolve().parent.parent / "data" / "arch.txt"


def read_table_text(path: Optional[Union[str, Path]] = None) -> str:
    """Return the raw text of the bundled table, or of the file at path."""
    table_path = Path(path).expanduser() if path else TABLE_FILE
    logger.debug("Reading architecture table from %s", table_path)
    # newline="" keeps a lone CR inside its line
    with open(table_path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def split_lines(text: str) -> List[str]:
    """
    Split table text into lines.

    Only LF ends a line. One trailing CR is dropped from each line, and a
    final newline does not start an extra, empty line.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load(text: Optional[str] = None, num_fields: int = NUM_FIELDS) -> Tuple[ArchitectureRecord, ...]:
    """
    Parse every line of the architecture table.

    Args:
        text: Table contents; the bundled table is used when omitted
        num_fields: Number of flag columns per line

    Returns:
        Records in the order their lines appear

    Raises:
        ParseError: for the first line that cannot be parsed, with its
            1-based line number filled in
    """
    if text is None:
        text = read_table_text()

    records = []
    for line_number, line in enumerate(split_lines(text), start=1):
        try:
            records.append(parse_line(line, num_fields))
        except ParseError as e:
            e.line_number = line_number
            logger.debug("Aborting table load at line %d", line_number)
            raise

    logger.info("Loaded %d architectures", len(records))
    return tuple(records)
