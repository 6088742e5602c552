# SPDX-License-Identifier: MIT
"""Parsing of ``major.minor.patch[-tag]`` version strings.

The grammar is read in a single left-to-right pass over a
:class:`~tagver.reader.CharReader` with one character of lookahead:

- leading and trailing spaces (``' '`` only) are skipped;
- each numeric component is one or more ASCII digits, at most
  :data:`~tagver.version.MAX_COMPONENT`;
- components are separated by exactly ``'.'``;
- an optional tag follows ``'-'`` and is one or more of ``[0-9A-Za-z-]``;
- nothing else may follow.

Malformed input is an ordinary outcome: :func:`parse` returns ``None``.
:func:`parse_version` is the strict form that raises instead.

Example:
    >>> parse("  1.2.3-alpha1 ")
    Version(major=1, minor=2, patch=3, tag='alpha1')
    >>> parse("1.2") is None
    True
"""

from __future__ import annotations

import logging
import string
from typing import Any, Optional

from .errors import InvalidVersionError
from .reader import EOF, CharReader
from .version import MAX_COMPONENT, Version

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits)
TAG_CHARS = frozenset(string.ascii_letters + string.digits + "-")


class _Rejected(Exception):
    """Internal signal carrying the reason a parse failed."""


def _read_whitespace(reader: CharReader, ch: str) -> str:
    while ch == " ":
        ch = reader.read_char()
    return ch


def _read_digits(reader: CharReader, ch: str, component: str) -> tuple[int, str]:
    value = 0
    count = 0
    while ch in DIGITS:
        value = value * 10 + ord(ch) - ord("0")
        # Reject as soon as the run overflows
        if value > MAX_COMPONENT:
            raise _Rejected(f"{component} exceeds {MAX_COMPONENT}")
        count += 1
        ch = reader.read_char()

    if not count:
        raise _Rejected(f"expected digits for {component}")
    return value, ch


def _read_tag(reader: CharReader) -> tuple[str, str]:
    buf = []
    ch = reader.read_char()
    while ch in TAG_CHARS:
        buf.append(ch)
        ch = reader.read_char()

    if not buf:
        raise _Rejected("empty tag after '-'")
    return "".join(buf), ch


def _parse_components(reader: CharReader) -> tuple[Version, str]:
    ch = _read_whitespace(reader, reader.read_char())

    major, ch = _read_digits(reader, ch, "major")
    if ch != ".":
        raise _Rejected("expected '.' after major")

    minor, ch = _read_digits(reader, reader.read_char(), "minor")
    if ch != ".":
        raise _Rejected("expected '.' after minor")

    patch, ch = _read_digits(reader, reader.read_char(), "patch")

    tag = None
    if ch == "-":
        tag, ch = _read_tag(reader)

    return Version(major=major, minor=minor, patch=patch, tag=tag), ch


def parse_reader(reader: CharReader) -> Optional[tuple[Version, str]]:
    """Parse a version from the front of a character reader.

    Leading spaces are skipped. Reading stops at the first character that
    cannot continue the version; that character is returned alongside the
    version so the caller can decide whether anything may follow it.

    Args:
        reader: Source positioned at the start of the version

    Returns:
        ``(version, next_char)``, where ``next_char`` may be ``EOF``, or
        ``None`` if no version could be read
    """
    try:
        return _parse_components(reader)
    except _Rejected as exc:
        logger.debug("Rejected version at offset %d: %s", reader.position, exc)
        return None


def _parse(text: str) -> Version:
    reader = CharReader.from_string(text)
    version, ch = _parse_components(reader)
    if _read_whitespace(reader, ch) != EOF:
        raise _Rejected(f"unexpected trailing input at offset {reader.position}")
    return version


def parse(text: Any) -> Optional[Version]:
    """Parse a version string, returning ``None`` if it is malformed.

    The whole input must be a version, optionally surrounded by spaces.
    This function never raises.

    Args:
        text: The string to parse. Non-string values are rejected.

    Returns:
        The parsed Version, or None

    Examples:
        >>> parse("1.2.3")
        Version(major=1, minor=2, patch=3, tag=None)
        >>> parse("1.2.3 abc") is None
        True
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string version input of type %s", type(text).__name__)
        return None

    try:
        return _parse(text)
    except _Rejected as exc:
        logger.debug("Rejected version %r: %s", text, exc)
        return None


def parse_version(text: Any) -> Version:
    """Parse a version string, raising if it is malformed.

    Args:
        text: The string to parse

    Returns:
        The parsed Version

    Raises:
        InvalidVersionError: If ``text`` is not a string or not a version
    """
    if not isinstance(text, str):
        raise InvalidVersionError(
            str(text), f"Version must be a string, got {type(text).__name__}"
        )

    try:
        return _parse(text)
    except _Rejected as exc:
        raise InvalidVersionError(text, f"Invalid version {text!r}: {exc}") from None


def is_valid_version(text: Any) -> bool:
    """Return True if ``text`` parses as a version."""
    return parse(text) is not None
