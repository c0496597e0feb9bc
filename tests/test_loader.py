"""
Tests for arch/loader.py - loading whole tables.
"""

import pytest

from gccarch.arch.errors import ParseError
from gccarch.arch.loader import TABLE_FILE, load, read_table_text, split_lines

from conftest import table_line


class TestLoad:
    """Tests for load()."""

    def test_empty_input(self):
        """Test an empty table loads as no records, not an error."""
        assert load("") == ()

    def test_keeps_line_order(self, sample_table):
        """Test records come back in source line order, duplicates included."""
        records = load(sample_table)
        assert [r.name for r in records] == ["arm", "mips", "fr30", "arm", "vax"]

    def test_trailing_newline_is_not_a_line(self):
        """Test a final newline does not produce an extra, empty line."""
        text = table_line("arm", "H") + "\n"
        assert len(load(text)) == 1

    def test_crlf_line_endings(self):
        """Test CRLF-terminated tables load the same as LF ones."""
        lines = [table_line("arm", "H"), table_line("sh", "Q")]
        assert load("\r\n".join(lines)) == load("\n".join(lines))

    def test_form_feed_glyph_sets_bit(self):
        """Test a form feed in a flag column is a set bit, not a line break."""
        records = load("arm | " + "\x0c" + " " * 24 + "\n")
        assert len(records) == 1
        assert records[0].flags == 1

    @pytest.mark.parametrize("glyph", ["\r", "\x0b", "\x1c", "\x85", "\u2028"])
    def test_only_lf_ends_a_line(self, glyph):
        """Test other line-break characters stay inside the line."""
        records = load("arm | " + " " * 3 + glyph + " " * 21)
        assert records[0].flags == 1 << 3

    def test_aborts_on_first_bad_line(self):
        """Test a malformed line aborts the load with its line number."""
        text = "\n".join([
            table_line("arm", "H"),
            "mips | QCB",
            "not a table line",
        ])
        with pytest.raises(ParseError) as exc_info:
            load(text)
        assert exc_info.value.line_number == 2
        assert exc_info.value.line == "mips | QCB"
        assert "line 2" in str(exc_info.value)

    def test_blank_line_in_middle_fails(self):
        """Test an embedded blank line is a parse error."""
        text = table_line("arm", "H") + "\n\n" + table_line("sh", "Q")
        with pytest.raises(ParseError) as exc_info:
            load(text)
        assert exc_info.value.line_number == 2

    def test_custom_field_count(self):
        """Test num_fields controls how many columns are consumed."""
        records = load("tiny | x x", num_fields=3)
        assert records[0].flags == 0b101


class TestSplitLines:
    """Tests for split_lines()."""

    @pytest.mark.parametrize("text, expected", [
        ("", []),
        ("a\n", ["a"]),
        ("a\r\nb", ["a", "b"]),
        ("a\n\nb\n", ["a", "", "b"]),
        ("a\x0cb\rc\u2028d", ["a\x0cb\rc\u2028d"]),
    ])
    def test_split(self, text, expected):
        """Test only LF ends a line and one trailing CR is dropped."""
        assert split_lines(text) == expected


class TestBundledTable:
    """Tests for the table shipped with the package."""

    def test_table_file_exists(self):
        """Test the bundled table is present."""
        assert TABLE_FILE.is_file()

    def test_bundled_table_loads(self):
        """Test every line of the bundled table parses."""
        records = load()
        assert len(records) > 40
        names = [r.name for r in records]
        for expected in ("aarch64", "arm", "i386", "mips", "riscv", "sparc", "xtensa"):
            assert expected in names

    def test_bundled_table_never_sets_placeholder(self):
        """Test the bundled table leaves the placeholder column blank."""
        for record in load():
            assert not record.has_characteristic(11)

    def test_read_table_text_from_path(self, sample_table_file, sample_table):
        """Test reading an alternate table from disk."""
        assert read_table_text(sample_table_file) == sample_table
        assert read_table_text(str(sample_table_file)) == sample_table

    def test_read_table_text_keeps_lone_cr(self, tmp_path):
        """Test a lone CR in a table file is not turned into a newline."""
        path = tmp_path / "cr.txt"
        path.write_bytes(b"arm | " + b"\r" + b" " * 24 + b"\r\n")
        text = read_table_text(path)
        assert text.endswith("\r\n")
        assert load(text)[0].flags == 1

    def test_read_table_text_missing_file(self, tmp_path):
        """Test a missing alternate table raises OSError."""
        with pytest.raises(OSError):
            read_table_text(tmp_path / "nope.txt")
