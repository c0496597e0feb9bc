"""
Pytest configuration and fixtures for gccarch tests.
"""

import sys
import logging
import pytest
from pathlib import Path

# Add project root to path so the tests run without installing the package
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from gccarch.arch import ArchitectureDatabase


@pytest.fixture(autouse=True)
def gccarch_home(tmp_path, monkeypatch):
    """Point ~/.gccarch at a temporary directory for every test."""
    home = tmp_path / ".gccarch"
    monkeypatch.setenv("GCCARCH_HOME", str(home))
    yield home
    logger = logging.getLogger("gccarch")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def flag_field(*codes, unknown=()):
    """Build a 25-column flag field with the given short codes set."""
    upper = "HMSLQNFICBD"
    lower = "lqrpbfmgiates"
    columns = []
    for code in upper:
        columns.append(code if code in codes else "?" if code in unknown else " ")
    columns.append(" ")
    for code in lower:
        columns.append(code if code in codes else "?" if code in unknown else " ")
    return "".join(columns)


def table_line(name, *codes, unknown=()):
    return f"{name:<17}| {flag_field(*codes, unknown=unknown)}"


@pytest.fixture
def sample_table():
    """A small table with a duplicate name and an unknown marker."""
    return "\n".join([
        table_line("arm", "H", "L"),
        table_line("mips", "Q", "C", "B", "q", "r", "s"),
        table_line("fr30", "F", "I", "B", "p", "b", unknown=("H", "M")),
        table_line("arm", "D", "e"),
        table_line("vax", "M", "I", "b", "s"),
    ]) + "\n"


@pytest.fixture
def sample_db(sample_table):
    """ArchitectureDatabase built from sample_table."""
    return ArchitectureDatabase.load(sample_table)


@pytest.fixture
def sample_table_file(tmp_path, sample_table):
    """sample_table written to disk."""
    path = tmp_path / "arch.txt"
    path.write_text(sample_table)
    return path
