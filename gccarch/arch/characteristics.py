"""
Characteristic Registry

The fixed, ordered set of columns in GCC's back-end table. A characteristic's
index is its column in the table and is never renumbered; the upper-case
hardware columns and the lower-case port columns are separated by a single
unused placeholder column.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Sequence, Tuple

from gccarch.arch.errors import UnknownCharacteristicError


logger = logging.getLogger("gccarch.arch.characteristics")


@dataclass(frozen=True)
class Characteristic:
    """One boolean column of the architecture table"""
    index: int
    name: str
    short_code: Optional[str]
    description: str
    placeholder: bool = False

    def __str__(self) -> str:
        return f"{self.short_code}: {self.description}"


PLACEHOLDER_INDEX = 11

# Column order follows GCC's backends page and must not change.
CHARACTERISTICS: Tuple[Characteristic, ...] = (
    Characteristic(0, "NO_HARDWARE_IMPL", "H",
                   "a hardware implementation does not exist"),
    Characteristic(1, "HARDWARE_IMPL_NOT_MANUFACTURED", "M",
                   "a hardware implementation is not currently being manufactured"),
    Characteristic(2, "NO_FREE_SIM", "S",
                   "a free simulator does not exist"),
    Characteristic(3, "INT_REGS_LT_32B", "L",
                   "integer registers are narrower than 32 bits"),
    Characteristic(4, "INT_REGS_GTE_64B", "Q",
                   "integer registers are at least 64 bits wide"),
    Characteristic(5, "MEM_NOT_BYTE_ADDR_OR_NOT_8B", "N",
                   "memory is not byte addressable, and/or bytes are not eight bits"),
    Characteristic(6, "NO_FLOAT_IN_INSTR_SET", "F",
                   "floating point arithmetic is not included in the instruction set"),
    Characteristic(7, "NO_IEEE_FLOAT", "I",
                   "architecture does not use IEEE format floating point numbers"),
    Characteristic(8, "NO_SINGLE_COND_CODE_REG", "C",
                   "architecture does not have a single condition code register"),
    Characteristic(9, "HAS_DELAY_SLOTS", "B",
                   "architecture has delay slots"),
    Characteristic(10, "STACK_GROWS_UP", "D",
                   "architecture has a stack that grows upward"),
    Characteristic(PLACEHOLDER_INDEX, "IGNORE", None, "", placeholder=True),
    Characteristic(12, "NO_ILP32_MODE_INT_ARITH", "l",
                   "port cannot use ILP32 mode integer arithmetic"),
    Characteristic(13, "HAS_LP64_MODE_INT_ARITH", "q",
                   "port can use LP64 mode integer arithmetic"),
    Characteristic(14, "SWITCH_ILP32_AND_LP64", "r",
                   "port can switch between ILP32 and LP64 at runtime"),
    Characteristic(15, "HAS_DEFINE_PEEPHOLE", "p",
                   "port uses `define_peephole` (as opposed to `define_peephole2`)"),
    Characteristic(16, "STAR_DOTS_FOR_OUTPUT_TEMPLATES", "b",
                   "port uses \"* ...\" notation for output template code"),
    Characteristic(17, "NO_PROLOGUE_EPILOGUE_RTL_EXPANDERS", "f",
                   "port does not define prologue and/or epilogue RTL expanders"),
    Characteristic(18, "NO_DEFINE_CONSTANTS", "m",
                   "port does not use `define_constants`"),
    Characteristic(19, "NO_TARGET_ASM_FUNCTION_PROLOGUE_EPILOGUE", "g",
                   "port does not define `TARGET_ASM_FUNCTION_(PRO|EPI)LOGUE`"),
    Characteristic(20, "MI_THUNKS_WITH_MACRO", "i",
                   "port generates multiple inheritance thunks using "
                   "`TARGET_ASM_OUTPUT_MI(_VCALL)_THUNK`"),
    Characteristic(21, "USES_LRA_BY_DEFAULT", "a",
                   "port uses LRA (by default, i.e. unless overriden by a switch)"),
    Characteristic(22, "ONE_ASM_INSTR_OR_SPLIT", "t",
                   "all instructions either produce exactly one assembly instructions, "
                   "or trigger a `define_split`"),
    Characteristic(23, "ELF_NOT_SUPPORTED", "e",
                   "`<arch>-elf` is not a supported target"),
    Characteristic(24, "ELF_CORRECT_FOR_SIM", "s",
                   "`<arch>-elf` is the correct target to use with the simulator in `/cvs/src`"),
)

NUM_FIELDS = len(CHARACTERISTICS)


class CharacteristicRegistry:
    """
    Bidirectional lookup over the characteristic table.

    The table is checked once at construction:
    - indices are exactly 0..n-1, in order
    - exactly one placeholder column, with no short code
    - every real characteristic has a unique single-character short code
    """

    def __init__(self, characteristics: Sequence[Characteristic] = CHARACTERISTICS):
        self._by_index: Tuple[Characteristic, ...] = tuple(characteristics)
        self._by_code: Dict[str, Characteristic] = {}

        for position, characteristic in enumerate(self._by_index):
            if characteristic.index != position:
                raise ValueError(
                    f"characteristic {characteristic.name} has index "
                    f"{characteristic.index}, expected {position}"
                )
            if characteristic.placeholder:
                if characteristic.short_code is not None:
                    raise ValueError(f"placeholder {characteristic.name} has a short code")
                continue

            code = characteristic.short_code
            if code is None or len(code) != 1 or not code.isprintable():
                raise ValueError(f"bad short code {code!r} for {characteristic.name}")
            if code in self._by_code:
                raise ValueError(
                    f"short code {code!r} used by both {self._by_code[code].name} "
                    f"and {characteristic.name}"
                )
            self._by_code[code] = characteristic

        placeholders = [c for c in self._by_index if c.placeholder]
        if len(placeholders) != 1:
            raise ValueError(f"expected exactly one placeholder column, found {len(placeholders)}")

        self._real = tuple(c for c in self._by_index if not c.placeholder)
        logger.debug("Characteristic registry built with %d columns", len(self._by_index))

    def __len__(self) -> int:
        return len(self._by_index)

    def __iter__(self) -> Iterator[Characteristic]:
        return iter(self._by_index)

    @property
    def num_fields(self) -> int:
        """Number of flag columns in a table line, placeholder included"""
        return len(self._by_index)

    def by_short_code(self, code: str) -> Characteristic:
        """Get a real characteristic by its exact, case-sensitive short code"""
        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownCharacteristicError(code) from None

    def by_index(self, index: int) -> Characteristic:
        """Get the characteristic in a given column"""
        if not 0 <= index < len(self._by_index):
            raise IndexError(f"characteristic index out of range: {index}")
        return self._by_index[index]

    def all_real(self) -> Tuple[Characteristic, ...]:
        """All characteristics except the placeholder, in column order"""
        return self._real


REGISTRY = CharacteristicRegistry()
