# SPDX-License-Identifier: MIT
"""Unit tests for the character reader."""

import io

from tagver import EOF, CharReader


class TestCharReader:
    """Tests for CharReader."""

    def test_reads_string(self):
        """Test reading a string character by character."""
        reader = CharReader.from_string("ab")
        assert reader.read_char() == "a"
        assert reader.read_char() == "b"
        assert reader.read_char() == EOF

    def test_eof_repeats(self):
        """Test that EOF is returned on every read after exhaustion."""
        reader = CharReader.from_string("")
        assert reader.read_char() == EOF
        assert reader.read_char() == EOF

    def test_reads_stream(self):
        """Test reading from a text stream."""
        reader = CharReader(io.StringIO("x."))
        assert [reader.read_char() for _ in range(4)] == ["x", ".", EOF, EOF]

    def test_position(self):
        """Test that position counts consumed characters only."""
        reader = CharReader(io.StringIO("12"))
        reader.read_char()
        reader.read_char()
        reader.read_char()
        assert reader.position == 2

    def test_eof_is_not_a_character(self):
        """Test that the sentinel cannot collide with real input."""
        assert EOF == ""
        assert len(EOF) == 0
