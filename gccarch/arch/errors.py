"""
Error kinds raised by the architecture table core and the CLI shell.

Each kind carries the offending input and the process exit code the shell
reports it with, so callers can tell them apart without parsing messages.
"""

from typing import Iterable, Optional


EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_PARSE_ERROR = 3
EXIT_UNKNOWN_ARCHITECTURE = 4
EXIT_UNKNOWN_CHARACTERISTIC = 5


class GccArchError(Exception):
    """Base class for every error gccarch reports to the user."""
    exit_code = EXIT_FAILURE


class ParseError(GccArchError):
    """A line of the architecture table does not have the expected shape."""
    exit_code = EXIT_PARSE_ERROR

    def __init__(self, line: str, reason: str, line_number: Optional[int] = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        super().__init__(line, reason, line_number)

    def __str__(self) -> str:
        where = "malformed table line"
        if self.line_number is not None:
            where = f"{where} {self.line_number}"
        return f"{where}: {self.reason}: {self.line!r}"


class UnknownArchitectureError(GccArchError):
    """No architecture with the requested name is in the table."""
    exit_code = EXIT_UNKNOWN_ARCHITECTURE

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"'{self.name}' is not a known architecture"


class UnknownCharacteristicError(GccArchError):
    """No characteristic uses the requested short code."""
    exit_code = EXIT_UNKNOWN_CHARACTERISTIC

    def __init__(self, code: str):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"'{self.code}' is not a known characteristic"


class UsageError(GccArchError):
    """The command line asked for no query mode, or for several at once."""
    exit_code = EXIT_USAGE


class ConflictingArgumentsError(UsageError):
    def __init__(self, offenders: Iterable[str]):
        self.offenders = list(offenders)
        super().__init__(self.offenders)

    def __str__(self) -> str:
        return f"can't specify {', '.join(self.offenders)} together"


class NothingRequestedError(UsageError):
    def __str__(self) -> str:
        return "must specify one of --arch, --feat, --archs or --feats"
