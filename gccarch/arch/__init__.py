"""
gccarch architecture table

Parses GCC's back-end architecture table and answers queries against it.
"""

from gccarch.arch.architectures import ArchitectureDatabase
from gccarch.arch.characteristics import (
    CHARACTERISTICS,
    NUM_FIELDS,
    PLACEHOLDER_INDEX,
    REGISTRY,
    Characteristic,
    CharacteristicRegistry,
)
from gccarch.arch.errors import (
    GccArchError,
    ParseError,
    UnknownArchitectureError,
    UnknownCharacteristicError,
)
from gccarch.arch.loader import load, read_table_text
from gccarch.arch.parser import ArchitectureRecord, parse_line

__all__ = [
    "ArchitectureDatabase",
    "ArchitectureRecord",
    "CHARACTERISTICS",
    "Characteristic",
    "CharacteristicRegistry",
    "GccArchError",
    "NUM_FIELDS",
    "PLACEHOLDER_INDEX",
    "ParseError",
    "REGISTRY",
    "UnknownArchitectureError",
    "UnknownCharacteristicError",
    "load",
    "parse_line",
    "read_table_text",
]
