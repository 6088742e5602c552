# SPDX-License-Identifier: MIT
"""Character source consumed by the version parser.

A :class:`CharReader` hands out one character per call and returns the
:data:`EOF` sentinel once the input is exhausted. The sentinel is the empty
string, so it never equals a real character and never belongs to a
character class built from real characters.
"""

from __future__ import annotations

from typing import Protocol, Union

# Returned by read_char() at end of input
EOF = ""


class TextSource(Protocol):
    """Anything with a text-mode ``read(size)``, e.g. ``io.StringIO``."""

    def read(self, size: int = -1) -> str: ...


class CharReader:
    """Reads a string or text stream one character at a time.

    Example:
        >>> reader = CharReader.from_string("1.")
        >>> reader.read_char(), reader.read_char(), reader.read_char()
        ('1', '.', '')
    """

    __slots__ = ("_text", "_stream", "_pos")

    def __init__(self, source: Union[str, TextSource]):
        if isinstance(source, str):
            self._text: str | None = source
            self._stream: TextSource | None = None
        else:
            self._text = None
            self._stream = source
        self._pos = 0

    @classmethod
    def from_string(cls, text: str) -> CharReader:
        return cls(text)

    def read_char(self) -> str:
        """Return the next character, or ``EOF`` at end of input."""
        if self._text is not None:
            if self._pos >= len(self._text):
                return EOF
            ch = self._text[self._pos]
            self._pos += 1
            return ch

        ch = self._stream.read(1)
        if not ch:
            # Streams may keep returning "" after exhaustion; stop touching them
            self._text = ""
            self._stream = None
            return EOF
        self._pos += 1
        return ch

    @property
    def position(self) -> int:
        """Number of characters consumed so far."""
        return self._pos
