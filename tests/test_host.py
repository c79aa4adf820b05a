"""Tests for host helpers and the terminal host."""

import io

import pytest
from bioseq_tools.host import (
    DisplaySurface,
    TerminalHost,
    escape_search_pattern,
    popup_size,
    read_sequence,
)


class TestEscapeSearchPattern:
    """Tests for literal search patterns."""

    def test_plain_sequence(self):
        """Test a plain sequence only gets the very-nomagic prefix."""
        assert escape_search_pattern("ACGT") == "\\VACGT"

    def test_special_characters(self):
        """Test backslash and slash are escaped."""
        assert escape_search_pattern("a/b\\c") == "\\Va\\/b\\\\c"

    def test_magic_characters_untouched(self):
        """Test regex characters are left literal under \\V."""
        assert escape_search_pattern("N.*[A]") == "\\VN.*[A]"

    def test_newline(self):
        """Test multi-line selections match across lines."""
        assert escape_search_pattern("AC\nGT") == "\\VAC\\nGT"


class TestPopupSize:
    """Tests for display sizing."""

    def test_fits_widest_line(self):
        """Test width follows the widest line and height the line count."""
        assert popup_size(["abc", "abcde", "a"]) == (5, 3)

    def test_empty(self):
        """Test an empty view still has a size."""
        assert popup_size([]) == (1, 1)


class TestDisplaySurface:
    """Tests for the display surface base class."""

    def test_error_defaults_to_show(self):
        """Test errors are shown as lines unless overridden."""

        class ListDisplay(DisplaySurface):
            def __init__(self):
                self.shown = []

            def show(self, lines):
                self.shown.append(lines)

        display = ListDisplay()
        display.error("first\nsecond")
        assert display.shown == [["first", "second"]]

    def test_abstract(self):
        """Test the interface cannot be instantiated."""
        with pytest.raises(TypeError):
            DisplaySurface()


class TestTerminalHost:
    """Tests for the stream-backed host."""

    def test_selection_from_stdin(self):
        """Test the selection is read from the input stream."""
        host = TerminalHost(stdin=io.StringIO("ACGT\nTTGA\n"))
        assert host.get_selection() == "ACGT\nTTGA"

    def test_show(self):
        """Test lines are printed inside a box as wide as the widest line."""
        out = io.StringIO()
        TerminalHost(stdout=out).show(["one", "three"])
        assert out.getvalue().splitlines() == [
            "\u256d\u2500\u2500\u2500\u2500\u2500\u256e",
            "\u2502one  \u2502",
            "\u2502three\u2502",
            "\u2570\u2500\u2500\u2500\u2500\u2500\u256f",
        ]

    def test_show_empty(self):
        """Test an empty result still draws a one-cell box."""
        out = io.StringIO()
        TerminalHost(stdout=out).show([])
        assert out.getvalue().splitlines() == ["\u256d\u2500\u256e", "\u2502 \u2502", "\u2570\u2500\u256f"]

    def test_search(self):
        """Test the pattern is printed."""
        out = io.StringIO()
        TerminalHost(stdout=out).search("\\VACGT")
        assert out.getvalue() == "\\VACGT\n"

    def test_error(self):
        """Test errors go to the error stream."""
        out, err = io.StringIO(), io.StringIO()
        TerminalHost(stdout=out, stderr=err).error("boom")
        assert err.getvalue() == "Error: boom\n"
        assert out.getvalue() == ""


class TestReadSequence:
    """Tests for sequence arguments."""

    def test_literal(self):
        """Test a literal argument is returned unchanged."""
        assert read_sequence("ACGT") == "ACGT"

    def test_dash_reads_stream(self):
        """Test '-' reads the sequence from the stream."""
        assert read_sequence("-", io.StringIO("GATTACA\n")) == "GATTACA"
