"""
Architecture Queries for gccarch

Answers questions about the loaded architecture table: which characteristics
an architecture has, and which architectures have a characteristic.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from gccarch.arch.characteristics import REGISTRY, Characteristic, CharacteristicRegistry
from gccarch.arch.errors import UnknownArchitectureError
from gccarch.arch import loader
from gccarch.arch.parser import ArchitectureRecord


logger = logging.getLogger("gccarch.arch.architectures")


class ArchitectureDatabase:
    """
    Read-only view over the records of one architecture table.

    Records keep the order of their lines in the table. Names are not
    required to be unique; lookups by name return the first match.
    """

    def __init__(self, records: Sequence[ArchitectureRecord],
                 registry: CharacteristicRegistry = REGISTRY):
        self._records: Tuple[ArchitectureRecord, ...] = tuple(records)
        self.registry = registry

    @classmethod
    def load(cls, text: Optional[str] = None,
             registry: CharacteristicRegistry = REGISTRY) -> "ArchitectureDatabase":
        """Build a database from table text (the bundled table by default)"""
        return cls(loader.load(text, registry.num_fields), registry)

    @classmethod
    def from_file(cls, path: Union[str, Path],
                  registry: CharacteristicRegistry = REGISTRY) -> "ArchitectureDatabase":
        """Build a database from a table file on disk"""
        return cls.load(loader.read_table_text(path), registry)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ArchitectureRecord]:
        return iter(self._records)

    @property
    def records(self) -> Tuple[ArchitectureRecord, ...]:
        return self._records

    def get_architecture(self, name: str) -> Optional[ArchitectureRecord]:
        """Get the first record with exactly this name"""
        for record in self._records:
            if record.name == name:
                return record
        return None

    def report_by_architecture(self, name: str) -> Tuple[Characteristic, ...]:
        """
        List the characteristics an architecture has.

        Args:
            name: Exact, case-sensitive architecture name

        Returns:
            Real characteristics whose bit is set, in column order

        Raises:
            UnknownArchitectureError: if no record has that name
        """
        record = self.get_architecture(name)
        if record is None:
            raise UnknownArchitectureError(name)

        characteristics: List[Characteristic] = []
        for index in record.set_indices():
            if index >= self.registry.num_fields:
                break
            characteristic = self.registry.by_index(index)
            if not characteristic.placeholder:
                characteristics.append(characteristic)

        logger.debug("%s has %d characteristics", name, len(characteristics))
        return tuple(characteristics)

    def report_by_characteristic(self, code: str) -> Tuple[str, ...]:
        """
        List the architectures that have a characteristic.

        Args:
            code: Short code of the characteristic, e.g. "B"

        Returns:
            Architecture names in table order

        Raises:
            UnknownCharacteristicError: if the code is not defined
        """
        characteristic = self.registry.by_short_code(code)
        names = tuple(
            record.name for record in self._records
            if record.has_characteristic(characteristic)
        )
        logger.debug("%d architectures have %s", len(names), code)
        return names

    def all_architecture_names(self) -> Tuple[str, ...]:
        """List all architecture names in table order"""
        return tuple(record.name for record in self._records)

    def all_characteristics(self) -> Tuple[Characteristic, ...]:
        """List all real characteristics in column order"""
        return self.registry.all_real()
